
from __future__ import annotations

import time
from pathlib import Path

from rich.console import Console

from gedcom_tree.config import get_config
from gedcom_tree.core import LayoutContext, LayoutResult, Pipeline
from gedcom_tree.logging import get_logger

console = Console(stderr=True)


def load_gedcom(path: Path, *, verbose: bool = False) -> LayoutResult:
    """
    Read a GEDCOM file and run the full parse + layout pipeline on it.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    cfg = get_config()
    ctx = LayoutContext(
        config=cfg,
        logger=get_logger("cli"),
        input_path=str(path),
    )
    result = Pipeline(ctx).run()

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Loaded GEDCOM in {elapsed:.2f}s")

    return result


def write_text(payload: str, *, out: Path | None) -> None:
    """
    Write text to stdout or file.
    """
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(payload, encoding="utf-8")
    else:
        print(payload)
