import py_compile
from pathlib import Path


def test_bot_and_main_compile() -> None:
    """The Discord facing modules should at least be syntactically valid.

    Compiling them catches regressions without requiring the ``discord``
    package to be installed.
    """

    root = Path(__file__).resolve().parent.parent / "wastewise_bot"
    for name in ("bot.py", "main.py", "ui/views.py", "ui/modals.py", "commands/register.py"):
        py_compile.compile(str(root / name), doraise=True)
