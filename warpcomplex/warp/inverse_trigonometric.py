"""
Inverse circular and hyperbolic functions.

All of them are compositions of csqrt and clog, so their branch cuts are the
ones those two functions place: principal root with re >= 0 and principal
argument in (-pi, pi].
"""
import warp as wp

from warpcomplex.warp.arithmetic import cdiv, cmul
from warpcomplex.warp.sqrt import csqrt
from warpcomplex.warp.transcendental import clog


@wp.func
def casin(z: wp.vec2) -> wp.vec2:
    """asin(z) = -i * log(iz + sqrt(1 - z^2))"""
    one = wp.vec2(1.0, 0.0)
    iz = cmul(wp.vec2(0.0, 1.0), z)
    return cmul(wp.vec2(0.0, -1.0), clog(iz + csqrt(one - cmul(z, z))))


@wp.func
def cacos(z: wp.vec2) -> wp.vec2:
    """acos(z) = -i * log(z + sqrt(z^2 - 1))"""
    one = wp.vec2(1.0, 0.0)
    return cmul(wp.vec2(0.0, -1.0), clog(z + csqrt(cmul(z, z) - one)))


@wp.func
def catan(z: wp.vec2) -> wp.vec2:
    """atan(z) = i/2 * log((1 - iz) / (1 + iz))"""
    one = wp.vec2(1.0, 0.0)
    iz = cmul(wp.vec2(0.0, 1.0), z)
    return cmul(wp.vec2(0.0, 0.5), clog(cdiv(one - iz, one + iz)))


@wp.func
def casinh(z: wp.vec2) -> wp.vec2:
    """asinh(z) = log(z + sqrt(z^2 + 1))"""
    one = wp.vec2(1.0, 0.0)
    return clog(z + csqrt(cmul(z, z) + one))


@wp.func
def cacosh(z: wp.vec2) -> wp.vec2:
    """acosh(z) = log(z + sqrt(z^2 - 1))"""
    one = wp.vec2(1.0, 0.0)
    return clog(z + csqrt(cmul(z, z) - one))


@wp.func
def catanh(z: wp.vec2) -> wp.vec2:
    """atanh(z) = 1/2 * log((1 + z) / (1 - z))"""
    one = wp.vec2(1.0, 0.0)
    return cmul(wp.vec2(0.5, 0.0), clog(cdiv(one + z, one - z)))
