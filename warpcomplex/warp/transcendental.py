import warp as wp

from warpcomplex.warp.arithmetic import cabs, carg


@wp.func
def clog(z: wp.vec2) -> wp.vec2:
    """Principal logarithm: log(z) = ln|z| + i*arg(z), arg in (-pi, pi]

    log(0) has a real part of -inf.
    """
    return wp.vec2(wp.log(cabs(z)), carg(z))


@wp.func
def cexp(z: wp.vec2) -> wp.vec2:
    """Complex exponential: exp(a + bi) = exp(a) * (cos(b) + i*sin(b))"""
    amplitude = wp.exp(z[0])
    return wp.vec2(amplitude * wp.cos(z[1]), amplitude * wp.sin(z[1]))
