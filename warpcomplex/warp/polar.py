import warp as wp

from warpcomplex.warp.arithmetic import cabs, carg


@wp.func
def cfrom_polar(radius: wp.float32, angle: wp.float32) -> wp.vec2:
    """r * exp(i*theta) = r * (cos(theta) + i*sin(theta))"""
    return wp.vec2(radius * wp.cos(angle), radius * wp.sin(angle))


@wp.func
def cto_polar(z: wp.vec2) -> wp.vec2:
    """(|z|, arg(z)) packed as (radius, angle)"""
    return wp.vec2(cabs(z), carg(z))


@wp.func
def cnormalize(z: wp.vec2) -> wp.vec2:
    """
    Projection onto the unit circle, z / |z|.
    Not guarded: z = 0 gives NaN components.
    """
    r = cabs(z)
    return wp.vec2(z[0] / r, z[1] / r)
