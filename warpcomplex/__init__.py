import warp as wp

from warpcomplex import functional
from warpcomplex.config import BadKernelConfig, KernelConfig

wp.init()

__version__ = "0.1.0"
