from __future__ import annotations

from pathlib import Path
from typing import Any, Union
import orjson


def json_load(path: Union[str, Path]) -> Any:
    with open(path, 'rb') as f:
        return orjson.loads(f.read())


def json_dump(path: Union[str, Path], data: Any, indent: bool = True) -> None:
    option = orjson.OPT_INDENT_2 if indent else 0
    with open(path, 'wb') as f:
        f.write(orjson.dumps(data, option=option))
