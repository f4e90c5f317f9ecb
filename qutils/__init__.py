"""
qutils - Small helpers for arrays, numbers, text, dates, logging and tables.

Every helper is a (nearly) pure function meant to be imported piecemeal.

Import from submodules directly:
    from qutils.core.arrays import chunk_array
    from qutils.core.numbers import bytes_to_size
    from qutils.ui.components.table import make_table_string
    from qutils.ui.logger import create_logger
"""


def _get_version():
    """Read version from VERSION file."""
    from pathlib import Path
    from importlib import metadata

    version_file = Path(__file__).parent.parent / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    try:
        return metadata.version("qutils")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()
