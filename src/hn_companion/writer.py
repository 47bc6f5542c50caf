"""Output writer for prompts and comment path maps."""

import json
from pathlib import Path
from typing import Any

from loguru import logger


class OutputWriter:
    """Write output files into a directory.

    - Files whose contents did not change are left untouched.
    - In dry-run mode nothing is written, only logged.
    """

    def __init__(self, outdir: str | Path, *, dry_run: bool = False, create: bool = True) -> None:
        self.outdir = str(Path(outdir).expanduser().resolve())
        self.dry_run = dry_run

        if not dry_run and not Path(self.outdir).is_dir():
            if not create:
                msg = f"Output directory {self.outdir!r} not found"
                raise ValueError(msg)
            Path(self.outdir).mkdir(parents=True, exist_ok=True)

        logger.debug("Writer ready, outdir {!r}, dry_run {!r}", self.outdir, dry_run)
        # (action, absolute filename) for every file touched this session.
        self.updates: list[tuple[str, str]] = []
        self._num_same = 0

    def is_possible_output(self, fname: str) -> bool:
        """Only json and txt files are ever written."""
        return fname.endswith(".json") or fname.endswith(".txt")

    def path_for(self, fname_rel: str) -> Path:
        return Path(self.outdir) / fname_rel

    def make_data_file(
        self,
        fname_rel: str,
        *,
        contents: str | None = None,
        data: Any = None,
    ) -> None:
        """Write contents to a file relative to the output directory.

        Args:
            fname_rel: Path relative to output directory.
            contents: String contents to write. If None, serialize data to json.
            data: Data to serialize as json. Mutually exclusive with contents.
        """
        if contents is None:
            contents = json.dumps(data, indent=2) + "\n"
        elif data is not None:
            msg = "Cannot specify both contents and data"
            raise ValueError(msg)
        if Path(fname_rel).is_absolute():
            msg = f"must be relative: {fname_rel!r}"
            raise ValueError(msg)

        fname = str((Path(self.outdir) / fname_rel).resolve())
        if not fname.startswith(self.outdir + "/"):
            msg = f"Path escapes outdir: {fname!r}"
            raise ValueError(msg)
        if not self.is_possible_output(fname):
            msg = f"Wanted to write {fname!r} but is_possible_output() returns False"
            raise ValueError(msg)

        action = "create"
        try:
            with open(fname, encoding="utf-8") as f:
                if f.read() == contents:
                    self._num_same += 1
                    return
            action = "update"
        except (FileNotFoundError, UnicodeDecodeError):
            pass

        self.updates.append((action, fname))

        if self.dry_run:
            logger.info("dry-run: would {} {!r}", action, fname)
        else:
            logger.debug("Writing ({}) {!r}", action, fname)
            Path(fname).parent.mkdir(parents=True, exist_ok=True)
            with open(fname, "w", encoding="utf-8") as f:
                f.write(contents)

    def summary(self) -> str:
        """One-line description of what this writer did."""
        created = sum(1 for action, _ in self.updates if action == "create")
        updated = sum(1 for action, _ in self.updates if action == "update")
        return f"{created} created, {updated} updated, {self._num_same} unchanged"
