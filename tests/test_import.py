"""Basic import tests to verify package structure."""


def test_import_schellingsim():
    """Verify main package imports."""
    import schellingsim
    assert schellingsim.__version__ == "0.1.0"


def test_import_core():
    """Verify core module structure exists."""
    from schellingsim import core
    assert hasattr(core, "SchellingEngine")
    assert hasattr(core, "Grid")


def test_import_analysis():
    """Verify analysis module structure exists."""
    from schellingsim import analysis
    assert hasattr(analysis, "__doc__")


def test_import_experiments():
    """Verify experiments module structure exists."""
    from schellingsim import experiments
    assert hasattr(experiments, "preference_sweep")
