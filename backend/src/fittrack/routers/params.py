from typing import Annotated

from fastapi import Path

from fittrack.schemas.base import SQL_INT_MAX

# Path ids beyond what an INTEGER column holds are a 400, not a driver error.
PathId = Annotated[int, Path(le=SQL_INT_MAX)]
