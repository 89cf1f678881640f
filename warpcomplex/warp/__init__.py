from warpcomplex.warp.arithmetic import (
    cabs,
    cabs2,
    carg,
    cconj,
    cdiv,
    cdiv_unguarded,
    cinv,
    cinv_unguarded,
    cmul,
    csquare,
)
from warpcomplex.warp.inverse_trigonometric import (
    cacos,
    cacosh,
    casin,
    casinh,
    catan,
    catanh,
)
from warpcomplex.warp.polar import cfrom_polar, cnormalize, cto_polar
from warpcomplex.warp.power import cpow, cpowi, cpowi_squaring
from warpcomplex.warp.sqrt import csqrt
from warpcomplex.warp.transcendental import cexp, clog
from warpcomplex.warp.trigonometric import ccos, ccosh, csin, csinh, ctan, ctanh
