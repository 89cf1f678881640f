from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Union

import yaml

ZERO_DIVISION_POLICIES = ("saturate", "propagate")
POWI_STRATEGIES = ("linear", "squaring")


class BadKernelConfig(Exception):
    """Occurs when something about the kernel configuration is invalid"""


@dataclass(frozen=True)
class KernelConfig:
    """
    Params:
        - zero_division: What the host inv/div launch for an exact zero denominator.
            "saturate" returns (0, 0), "propagate" lets 0/0 produce NaN components.
        - powi_strategy: "linear" multiplies |n| times, "squaring" uses repeated
            squaring. Results agree within rounding only.
        - warn_on_downcast: Emit a UserWarning when a complex input wider than
            complex64 is narrowed before launch.
    """

    zero_division: str = "saturate"
    powi_strategy: str = "linear"
    warn_on_downcast: bool = True

    def __post_init__(self) -> None:
        if self.zero_division not in ZERO_DIVISION_POLICIES:
            raise BadKernelConfig(
                f"zero_division ({self.zero_division!r}) must be one of "
                f"{ZERO_DIVISION_POLICIES}"
            )
        if self.powi_strategy not in POWI_STRATEGIES:
            raise BadKernelConfig(
                f"powi_strategy ({self.powi_strategy!r}) must be one of "
                f"{POWI_STRATEGIES}"
            )
        if not isinstance(self.warn_on_downcast, bool):
            raise BadKernelConfig(
                f"warn_on_downcast ({self.warn_on_downcast!r}) must be a bool"
            )

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, values: dict) -> "KernelConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise BadKernelConfig(f"Unknown kernel config keys: {unknown}")
        return cls(**values)

    @classmethod
    def from_yaml(
        cls, file_path: Union[str, Path], key: str = "kernel"
    ) -> "KernelConfig":
        """Load the mapping stored under ``key``; missing fields take defaults.

        Args:
            file_path (str): Path to YAML file.
            key (str, optional): Top-level entry holding the config. Defaults to "kernel".
        """
        with open(file_path, "r") as f:
            data = yaml.safe_load(f) or {}
        values = data.get(key) or {}
        if not isinstance(values, dict):
            raise BadKernelConfig(f"Entry {key!r} in {file_path} is not a mapping")
        return cls.from_dict(values)

    def to_yaml(self, file_path: Union[str, Path], key: str = "kernel") -> None:
        """Save the config under ``key``, preserving other entries of an existing file.

        Args:
            file_path (str): Path to YAML file to update.
            key (str, optional): Top-level entry to write. Defaults to "kernel".
        """
        existing_data = {}
        if Path(file_path).exists():
            with open(file_path, "r") as f:
                existing_data = yaml.safe_load(f) or {}
        existing_data[key] = self.to_dict()

        with open(file_path, "w") as f:
            yaml.dump(existing_data, f, default_flow_style=False)


DEFAULT_CONFIG = KernelConfig()
