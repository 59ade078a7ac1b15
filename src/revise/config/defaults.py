"""Default configuration for revise."""

DEFAULT_CHECK_CONFIG: dict[str, str | bool | int | None] = {
    "extension": ".set",
    "color": None,  # auto-detect
    "verbose": False,
    "quiet": False,
    "max_reports": None,  # unlimited
}

# Configuration file names, in order of preference
CONFIG_FILE_NAMES: tuple[str, ...] = ("config.yml", "config.yaml")
PROJECT_CONFIG_FILE_NAMES: tuple[str, ...] = ("revise.yml", "revise.yaml")
USER_CONFIG_DIR = ".revise"
