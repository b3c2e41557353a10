# smart_fridge/smart_fridge/application/name_matcher.py
from __future__ import annotations

import logging
import re
import unicodedata
from typing import Iterable, List

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

log = logging.getLogger("app.name_matcher")

_NON_ALNUM = re.compile(r"[^a-z0-9\s]+")


def normalize_text(text: str) -> str:
    """Lower-case, strip accents and punctuation, collapse whitespace."""
    text = (text or "").strip().lower()
    text = unicodedata.normalize("NFD", text)
    text = "".join(ch for ch in text if unicodedata.category(ch) != "Mn")
    text = _NON_ALNUM.sub(" ", text)
    return re.sub(r"\s+", " ", text).strip()


class NameMatcher:
    """
    "Did you mean" lookup over a fixed list of names.
    Signals, in order:
      - exact match after normalization
      - substring either way
      - char n-gram TF-IDF similarity (typos, plural forms)
    """

    def __init__(self, names: Iterable[str], min_score: float = 0.3) -> None:
        self.names: List[str] = list(dict.fromkeys(n for n in names if (n or "").strip()))
        self.min_score = min_score
        self._norm: List[str] = [normalize_text(n) for n in self.names]
        self._tfidf = TfidfVectorizer(analyzer="char_wb", ngram_range=(2, 4), min_df=1)
        self._X = self._tfidf.fit_transform(self._norm) if any(self._norm) else None

    def suggest(self, query: str, top_k: int = 3) -> List[str]:
        q = normalize_text(query)
        if not q or not self.names or top_k <= 0:
            return []

        hits: List[str] = [n for n, nn in zip(self.names, self._norm) if nn == q]
        hits += [n for n, nn in zip(self.names, self._norm) if nn and nn != q and (q in nn or nn in q)]

        if self._X is not None:
            qv = self._tfidf.transform([q])
            sims = (self._X @ qv.T).toarray().ravel()  # rows are l2-normalized
            for i in np.argsort(-sims):
                if sims[int(i)] < self.min_score:
                    break
                hits.append(self.names[int(i)])

        out = list(dict.fromkeys(hits))[:top_k]
        log.debug("Suggestions for %r: %s", query, out)
        return out
