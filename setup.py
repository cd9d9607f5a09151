from importlib.machinery import SourceFileLoader
from pathlib import Path
from types import ModuleType

from setuptools import find_packages, setup


loader = SourceFileLoader("deckgen", "./deckgen/__init__.py")
deckgen = ModuleType(loader.name)
loader.exec_module(deckgen)

setup(
    name="deckgen",
    version=deckgen.__version__,  # type: ignore
    description="Emitter of deck markup: slides, shapes and text as percentages.",
    long_description=(Path(__file__).parent / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    author="deckgen developers",
    python_requires=">=3.10.0",
    packages=find_packages(exclude=["tests"]),
    install_requires=["Jinja2", "pydantic>=2", "PyYAML"],
    extras_require={"test": ["pytest"]},
    include_package_data=True,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
