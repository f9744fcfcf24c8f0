def _get_version() -> str:
    import tomllib
    from importlib.metadata import version
    from pathlib import Path
    from typing import cast

    pyproject = Path(__file__).parent.parent.joinpath("pyproject.toml")
    if not pyproject.is_file():
        return version("contact-api")

    with pyproject.open("rb") as file:
        return cast(str, tomllib.load(file)["tool"]["poetry"]["version"])


__version__ = _get_version()
