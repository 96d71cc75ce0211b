"""
Export of scored sentences: one row per sentence, in text order.
"""
from __future__ import annotations

from pathlib import Path
from typing import List, Union

import pandas as pd

from prose_vader.core.models import SentenceResult

COLUMNS = ["index", "sentence", "neg", "neu", "pos", "compound"]


def results_to_frame(results: List[SentenceResult]) -> pd.DataFrame:
    rows = []
    for i, result in enumerate(results):
        rows.append({"index": i, "sentence": result.text, **result.score.to_dict()})
    return pd.DataFrame(rows, columns=COLUMNS)


def write_csv(results: List[SentenceResult], path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    results_to_frame(results).to_csv(path, index=False)
    return path
