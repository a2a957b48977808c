"""Verify every module imports cleanly with no errors."""


def test_import_issy():
    import issy  # noqa: F401


def test_import_cli():
    import issy.cli  # noqa: F401


def test_import_config():
    import issy.config  # noqa: F401


def test_import_defaults():
    import issy.defaults  # noqa: F401


def test_import_errors():
    import issy.errors  # noqa: F401


def test_import_fs():
    import issy.fs  # noqa: F401


def test_import_output():
    import issy.output  # noqa: F401


def test_import_issues():
    import issy.issues  # noqa: F401


def test_import_roadmap():
    import issy.roadmap  # noqa: F401


def test_import_query():
    import issy.query  # noqa: F401
