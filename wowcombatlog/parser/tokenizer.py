"""
Line tokenizer for WoW combat log lines.
"""

from typing import Dict, List


class LineTokenizer:
    """
    Splits raw combat log lines into fields.

    The format is CSV-like: fields are comma separated, names are double
    quoted and may contain commas, and COMBATANT_INFO / CHALLENGE_MODE_START
    embed bracketed lists whose commas are not field separators.
    """

    def __init__(self):
        self.line_count = 0
        self.empty_count = 0

    def split(self, line: str) -> List[str]:
        """
        Split a single line into fields.

        Args:
            line: Raw line from combat log file

        Returns:
            List of field strings with surrounding quotes removed, empty for
            a blank line
        """
        self.line_count += 1

        # Strip any trailing whitespace and a UTF-8 BOM on the first line
        line = line.rstrip("\r\n").lstrip("\ufeff").rstrip()
        if not line:
            self.empty_count += 1
            return []

        return self._split_params(line)

    def _split_params(self, params_str: str) -> List[str]:
        """
        Split parameter string by commas, handling quoted strings and nested structures.

        Args:
            params_str: Comma-separated parameter string

        Returns:
            List of parameter values
        """
        params = []
        current = []
        in_quotes = False
        depth = 0

        for char in params_str:
            if char == '"' and (not current or current[-1] != "\\"):
                in_quotes = not in_quotes
                current.append(char)
            elif not in_quotes:
                if char in "[(":
                    depth += 1
                    current.append(char)
                elif char in "])":
                    # Never go negative on a stray closer
                    depth = max(depth - 1, 0)
                    current.append(char)
                elif char == "," and depth == 0:
                    # Only split on commas at top level
                    params.append("".join(current).strip())
                    current = []
                else:
                    current.append(char)
            else:
                current.append(char)

        # Don't forget the last parameter
        params.append("".join(current).strip())

        return [self._unquote(param) for param in params]

    @staticmethod
    def _unquote(param: str) -> str:
        if len(param) >= 2 and param.startswith('"') and param.endswith('"'):
            return param[1:-1]
        return param

    def get_stats(self) -> Dict[str, int]:
        return {"lines_processed": self.line_count, "empty_lines": self.empty_count}
