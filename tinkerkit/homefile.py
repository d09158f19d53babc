"""Creating and reading a greeting file in a home directory."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, Sequence, Union

FILE_NAME = ".helloworld"
GREETING = "Hello, World!"


def read_hello_file(home: Union[str, Path, None] = None) -> str:
    """Read ``.helloworld`` in ``home``, creating it with a greeting if missing.

    The file is opened for appending and reading; when it is newly created the
    read starts after the greeting just written, so the result is empty.
    """
    path = (Path.home() if home is None else Path(home)) / FILE_NAME
    if not path.exists():
        print("File did not exists, creating new file!")
        with path.open("a+", encoding="utf-8") as f:
            f.write(GREETING)
            f.flush()
            return f.read()
    with path.open("a+", encoding="utf-8") as f:
        f.seek(0)
        return f.read()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Report the greeting file's path and contents; an argument overrides the home directory."""
    args = list(sys.argv[1:] if argv is None else argv)
    home = Path(args[0]) if args else Path.home()
    print(f"Path is {str(home / FILE_NAME)!r}")
    content = read_hello_file(home)
    print(f"Contents of the file: {content}")
    return 0


if __name__ == "__main__":
    sys.exit(main())