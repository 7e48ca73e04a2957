import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]

# psycopg2 ships a C extension; poetry's wheel cache can hand back a build
# for the wrong interpreter.
_C_EXT_PACKAGES = ["psycopg2"]


def _install(session: nox.Session, extras: bool = False) -> None:
    """Install the project and its test group into the nox virtualenv."""
    args = ["poetry", "install", "--with", "test"]
    if extras:
        args.append("--all-extras")
    session.run(*args, external=True)
    if extras:
        session.run("pip", "install", "--force-reinstall", "--no-cache-dir", *_C_EXT_PACKAGES)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the full suite against the in-memory providers."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_domain(session: nox.Session) -> None:
    """Aggregate and money tests only."""
    _install(session)
    session.run("pytest", "-m", "domain", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_sqlite(session: nox.Session) -> None:
    """Run the suite against the SQLite overlay of domain.toml."""
    _install(session)
    session.run("pytest", "--env", "sqlite", *session.posargs)


@nox.session(python=PYTHON_VERSIONS[-1])
def coverage(session: nox.Session) -> None:
    _install(session, extras=True)
    session.run("pytest", "--cov=bakeandtaste", "--cov-report=term-missing", *session.posargs)
