# src/campus_nav/io/config.py
import os
from pathlib import Path

from campus_nav.config.models import NavigatorModel


def load_config(path: str | Path) -> NavigatorModel:
    """Read a JSON navigator config; raises pydantic.ValidationError on bad input."""
    p = Path(os.path.expandvars(os.path.expanduser(str(path))))
    return NavigatorModel.model_validate_json(p.read_text(encoding="utf-8"))
