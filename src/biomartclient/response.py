import io

import pandas as pd

from .errors import ParseError


def _split(line):
    return line.rstrip("\r").split("\t")


class Response:
    """
    The TSV body returned by a BioMart query

    Parameters:
        text:
            the unmodified response body
        header:
            whether the first line holds the column names
    """

    def __init__(self, text: str, header: bool = True):
        self._text = text
        self._has_header = header

    def raw(self) -> str:
        return self._text

    def _check(self):
        if not self._text.strip():
            raise ParseError("Empty response body")
        if self._text.lstrip().startswith("<"):
            raise ParseError("Response body is markup, not a table: " + self._text[:100])

    def _lines(self):
        # non-blank lines, without their line ending
        for line in io.StringIO(self._text, newline=""):
            line = line.rstrip("\r\n")
            if line.strip("\r"):
                yield line

    def header(self):
        if not self._has_header:
            return None
        self._check()
        return _split(next(self._lines()))

    def records(self):
        """
        Iterate over the data rows, each a list of strings

        Every call starts a new pass over the body.
        """
        lines = self._lines()
        if self._has_header:
            next(lines, None)
        return (_split(line) for line in lines)

    def __iter__(self):
        return self.records()

    def to_frame(self) -> pd.DataFrame:
        if not self._text.strip():
            return pd.DataFrame()
        self._check()
        return pd.read_table(
            io.StringIO(self._text),
            sep="\t",
            header=0 if self._has_header else None,
            dtype=str,
            keep_default_na=False,
        )

    def __repr__(self):
        return f"Response({len(self._text)} characters)"
