import warp as wp

from warpcomplex.warp.arithmetic import cinv, cmul
from warpcomplex.warp.transcendental import cexp, clog


@wp.func
def cpow(a: wp.vec2, b: wp.vec2) -> wp.vec2:
    """Principal power a^b = exp(b * log(a))"""
    return cexp(cmul(b, clog(a)))


@wp.func
def cpowi(z: wp.vec2, n: wp.int32) -> wp.vec2:
    """
    Integer power by |n| successive multiplications of (1, 0) by z.
    Negative exponents take the saturating reciprocal of the product.
    """
    acc = wp.vec2(1.0, 0.0)
    for i in range(wp.abs(n)):
        acc = cmul(acc, z)
    if n < 0:
        return cinv(acc)
    return acc


@wp.func
def cpowi_squaring(z: wp.vec2, n: wp.int32) -> wp.vec2:
    """Integer power by repeated squaring, O(log |n|) multiplications"""
    acc = wp.vec2(1.0, 0.0)
    base = z
    e = wp.abs(n)
    while e > 0:
        if e % 2 == 1:
            acc = cmul(acc, base)
        base = cmul(base, base)
        e = e // 2
    if n < 0:
        return cinv(acc)
    return acc
