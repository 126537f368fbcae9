"""Verify package imports work correctly."""


def test_import_palabras() -> None:
    """Test that palabras can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import palabras

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert palabras.__version__ == expected


def test_public_names_resolve() -> None:
    import palabras

    for name in palabras.__all__:
        assert hasattr(palabras, name), name
