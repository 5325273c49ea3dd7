"""
Configuration for the autorun filesystem layer.

The defaults describe the real deployment: an ``autorun`` directory in the
user's home, with Wine detected through ``kernel32``. They are exposed as a
model so the resolver can be pointed at other values under test.
"""

from pathlib import PurePath, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FSConfig(BaseModel):
    """Pydantic schema for the home-directory resolver and autorun root."""

    model_config = ConfigDict(frozen=True)

    root_dir_name: str = Field(
        "autorun", description="Name of the autorun root directory inside the home directory"
    )
    system_library: str = Field(
        "kernel32", description="Core system library probed for the compatibility shim"
    )
    shim_marker_symbol: str = Field(
        "wine_get_unix_file_name",
        description="Export that only exists when Wine provides the system library",
    )
    shim_home_root: str = Field(
        "/home", description="Directory holding user homes on the host behind the shim"
    )
    user_env_var: str = Field(
        "USER", description="Environment variable naming the host user under the shim"
    )

    @field_validator("root_dir_name")
    @classmethod
    def _single_component(cls, value: str) -> str:
        parts = PurePath(value).parts
        if len(parts) != 1 or PurePath(value).is_absolute() or value in (".", ".."):
            raise ValueError(
                f"root_dir_name must be a single relative path component, got {value!r}"
            )
        return value

    @field_validator("shim_home_root")
    @classmethod
    def _absolute_posix(cls, value: str) -> str:
        if not PurePosixPath(value).is_absolute():
            raise ValueError(f"shim_home_root must be an absolute POSIX path, got {value!r}")
        return value

    @field_validator("system_library", "shim_marker_symbol", "user_env_var")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("value must not be empty")
        return value


DEFAULT_CONFIG = FSConfig()
