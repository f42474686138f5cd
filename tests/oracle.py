import random  # seeded operand streams


def reference_mod_exp(x, e, n):  # Right-to-left square-and-multiply using only contract mul/mod/shift.
    one = type(x)(1)
    result = one.mod(n)
    base = x.mod(n)
    e = e.clone()
    while not e.is_zero():
        if not e.is_even():
            result = result.mul(base).mod(n)
        base = base.mul(base).mod(n)
        e.iright_shift(one)
    return result


def reference_gcd(a, b):  # Plain Euclid over contract operations.
    a, b = a.abs(), b.abs()
    while not b.is_zero():
        a, b = b, a.mod(b)
    return a


def random_signed(rng, bits):  # Uniform int in (-2^bits, 2^bits).
    v = rng.getrandbits(bits)
    return -v if rng.random() < 0.5 else v


def operand_stream(seed, count, bits=256):  # Reproducible signed operand pairs, with edge values first.
    rng = random.Random(seed)
    pairs = [(0, 1), (1, 1), (-1, 1), (12, 34), (-12, 34), (12, -34), (-12, -34), (2**64, -(2**64) + 1)]
    for _ in range(count):
        pairs.append((random_signed(rng, rng.randrange(1, bits)), random_signed(rng, rng.randrange(1, bits))))
    return pairs


LARGE_X = int(  # 1024-bit base
    "417653931840771530406225971293556769925351769207235721650257629558293828796031115397206059067934284452829611906818956352854418342467914729341523414945427019410284762464062112274326172407819051167058569790660930309496043254270888417520676082271432948852231332576271876251597199882908964994070268531832274431027"
)
LARGE_E = int(  # 1024-bit exponent
    "21139356010872569239159922781526379521587348169074209285187910481667533072168468011617194695181255483288792585413365359733692097084373249198758148704369207793873998901870577262254971784191473102265830193058813215898765238784670469696574407580179153118937858890572095234316482449291777882525949871374961971753"
)
LARGE_N = int(  # 1024-bit odd modulus
    "129189808515414783602892982235788912674846062846614219472827821758734760420002631653235573915244294540972376140705505703576175711417114803419704967903726436285518767606681184247119430411311152556442947708732584954518890222684529678365388350886907287414896703685680210648760841628375425909680236584021041565183"
)
PRIME_229 = 229  # small prime modulus
