import warp as wp

from warpcomplex.warp.arithmetic import cdiv


@wp.func
def csin(z: wp.vec2) -> wp.vec2:
    """sin(a + bi) = sin(a)cosh(b) + i*cos(a)sinh(b)"""
    return wp.vec2(wp.sin(z[0]) * wp.cosh(z[1]), wp.cos(z[0]) * wp.sinh(z[1]))


@wp.func
def ccos(z: wp.vec2) -> wp.vec2:
    """cos(a + bi) = cos(a)cosh(b) - i*sin(a)sinh(b)"""
    return wp.vec2(wp.cos(z[0]) * wp.cosh(z[1]), -wp.sin(z[0]) * wp.sinh(z[1]))


@wp.func
def ctan(z: wp.vec2) -> wp.vec2:
    return cdiv(csin(z), ccos(z))


@wp.func
def csinh(z: wp.vec2) -> wp.vec2:
    """sinh(a + bi) = sinh(a)cos(b) + i*cosh(a)sin(b)"""
    return wp.vec2(wp.sinh(z[0]) * wp.cos(z[1]), wp.cosh(z[0]) * wp.sin(z[1]))


@wp.func
def ccosh(z: wp.vec2) -> wp.vec2:
    """cosh(a + bi) = cosh(a)cos(b) + i*sinh(a)sin(b)"""
    return wp.vec2(wp.cosh(z[0]) * wp.cos(z[1]), wp.sinh(z[0]) * wp.sin(z[1]))


@wp.func
def ctanh(z: wp.vec2) -> wp.vec2:
    return cdiv(csinh(z), ccosh(z))
