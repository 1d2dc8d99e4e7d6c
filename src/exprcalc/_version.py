import importlib.metadata
import logging
import os
from pathlib import Path

import toml

logger = logging.getLogger(__name__)


def find_pyproject_toml():
    EXPRCALC_PYPROJECT_TOML = os.getenv("EXPRCALC_PYPROJECT_TOML", "")
    if EXPRCALC_PYPROJECT_TOML:
        return Path(EXPRCALC_PYPROJECT_TOML).resolve()

    current_dir = Path(__file__).resolve().parent

    # Check until we reach the root folder
    while current_dir != current_dir.parent:
        candidate = current_dir / "pyproject.toml"
        if candidate.exists():
            return candidate

        current_dir = current_dir.parent

    return None


def get_version_from_pyproject():
    pyproject_toml_path = find_pyproject_toml()
    if not pyproject_toml_path:
        return None
    with open(pyproject_toml_path, encoding="utf-8") as file:
        pyproject_data = toml.load(file)
    project = pyproject_data.get("project", {})
    if project.get("name") != "exprcalc":
        return None
    return project.get("version")


def get_version_from_package(package_name):
    try:
        return importlib.metadata.version(package_name)
    except importlib.metadata.PackageNotFoundError:
        return None


def get_version():
    ver = get_version_from_pyproject() or get_version_from_package("exprcalc")
    if not ver:
        logger.warning("exprcalc version not found")
        return "0.0.0"
    return ver


version = get_version()
__version_info__ = tuple(int(part) for part in version.split(".")[:3] if part.isdigit())
display_version = __version__ = version


def main():
    print("exprcalc", version)


if __name__ == "__main__":
    main()
