from pathlib import Path

from setuptools import setup

EXPRCALC_SRC_DIR = "src"
EXPRCALC_MODULES_DIR = "exprcalc"


def get_packages():
    src = Path(EXPRCALC_SRC_DIR)
    return sorted(
        path.parent.relative_to(src).as_posix().replace("/", ".")
        for path in (src / EXPRCALC_MODULES_DIR).rglob("__init__.py")
    )


def main():
    setup(
        packages=get_packages(),
        package_dir={"": EXPRCALC_SRC_DIR},
        include_package_data=True,
        zip_safe=False,
    )


if __name__ == "__main__":
    main()
