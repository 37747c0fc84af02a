from pathlib import Path
from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    init = HERE / "src" / "hbconcat" / "__init__.py"
    for line in init.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("'\"")
    raise RuntimeError("__version__ not found in src/hbconcat/__init__.py")


setup(
    name="hbconcat",
    version=_read_version(),
    description="Handlebars-style concat engine: join scalars, arrays and objects with optional sub-templates",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "pybars3>=0.9.7",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
)
