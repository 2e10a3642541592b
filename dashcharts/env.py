from dashcharts.util.env import get_env

DEFAULT_OUTPUT_DIR = "charts"
DEFAULT_FORMAT = "svg"


def get_output_config() -> tuple[str, str]:
    """Get export configuration (output_dir, format)."""
    output_dir = get_env("DASHCHARTS_OUTPUT_DIR", DEFAULT_OUTPUT_DIR)
    fmt = get_env("DASHCHARTS_FORMAT", DEFAULT_FORMAT).lower()
    return output_dir, fmt
