import warp as wp


@wp.func
def cconj(z: wp.vec2) -> wp.vec2:
    """Complex conjugate: (a + bi)* = (a - bi)"""
    return wp.vec2(z[0], -z[1])


@wp.func
def cmul(a: wp.vec2, b: wp.vec2) -> wp.vec2:
    """Complex multiplication: (a + bi) * (c + di) = (ac - bd) + (ad + bc)i"""
    return wp.vec2(a[0] * b[0] - a[1] * b[1], a[0] * b[1] + a[1] * b[0])


@wp.func
def csquare(z: wp.vec2) -> wp.vec2:
    """Complex square: (a + bi)^2 = (a^2 - b^2) + 2abi"""
    return wp.vec2(z[0] * z[0] - z[1] * z[1], 2.0 * z[0] * z[1])


@wp.func
def cabs2(z: wp.vec2) -> wp.float32:
    """Squared magnitude: |a + bi|^2 = a^2 + b^2"""
    return z[0] * z[0] + z[1] * z[1]


@wp.func
def cabs(z: wp.vec2) -> wp.float32:
    """Complex absolute value: |a + bi| = sqrt(a^2 + b^2)

    Scaled by the larger component so that neither the squares overflow
    nor small components underflow.
    """
    a = wp.abs(z[0])
    b = wp.abs(z[1])
    big = wp.max(a, b)
    small = wp.min(a, b)
    if big == 0.0:
        return 0.0
    if big == wp.inf:
        return wp.inf
    t = small / big
    return big * wp.sqrt(1.0 + t * t)


@wp.func
def carg(z: wp.vec2) -> wp.float32:
    """Principal argument in (-pi, pi]"""
    return wp.atan2(z[1], z[0])


@wp.func
def cinv(z: wp.vec2) -> wp.vec2:
    """Complex reciprocal: 1 / z = z* / |z|^2

    Saturates: the reciprocal of an exact zero is zero, not infinity.
    Nonzero z whose |z|^2 underflows is not guarded: components divided
    by the zero denominator become inf, zero components become NaN.
    """
    if z[0] == 0.0 and z[1] == 0.0:
        return wp.vec2(0.0, 0.0)
    d = cabs2(z)
    return wp.vec2(z[0] / d, -z[1] / d)


@wp.func
def cinv_unguarded(z: wp.vec2) -> wp.vec2:
    """Complex reciprocal without the zero test; NaN components at z = 0"""
    d = cabs2(z)
    return wp.vec2(z[0] / d, -z[1] / d)


@wp.func
def cdiv(a: wp.vec2, b: wp.vec2) -> wp.vec2:
    """Complex division a / b = a * (1 / b), zero when b is exactly zero"""
    return cmul(a, cinv(b))


@wp.func
def cdiv_unguarded(a: wp.vec2, b: wp.vec2) -> wp.vec2:
    return cmul(a, cinv_unguarded(b))
