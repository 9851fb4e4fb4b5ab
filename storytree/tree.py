"""A story held as a binary decision tree, loaded from a delimited file."""

from __future__ import annotations

import re
import sys
from typing import IO, Dict, List, Optional

from .story import Node, Story

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_CHOICE = re.compile(r"[+-]?\d+")


def _leading_int(text: str) -> int:
    """Parse the integer at the start of text, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


class _ChoiceReader:
    """Reads whitespace-separated integer choices from a text stream."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self._pending = ""

    def next_choice(self) -> Optional[int]:
        """Return the next integer, None if the next token is not one.

        Raises EOFError once the stream is exhausted.
        """
        while not self._pending.strip():
            line = self._stream.readline()
            if not line:
                raise EOFError
            self._pending = line
        self._pending = self._pending.lstrip()
        match = _CHOICE.match(self._pending)
        if match is None:
            return None
        self._pending = self._pending[match.end():]
        return int(match.group())

    def discard_line(self) -> None:
        """Drop whatever is left of the current input line."""
        self._pending = ""


class GameDecisionTree:
    """A choose-your-path story whose events form a binary tree."""

    def __init__(self) -> None:
        self.root: Optional[Node[Story]] = None

    def load_story_from_file(self, filename, delimiter: str = "|") -> None:
        """Build the tree from lines of event|description|left|right.

        Lines missing an event, left or right number are reported and skipped.
        The event numbered 1 becomes the root.
        """
        if len(delimiter) != 1:
            raise ValueError("delimiter must be a single character")

        nodes: Dict[int, Node[Story]] = {}
        with open(filename, encoding="utf-8") as file:
            for raw in file:
                line = raw.rstrip("\n")
                fields = line.split(delimiter)
                fields += [""] * (4 - len(fields))
                event_str, description, left_str, right_str = fields[:4]

                if not event_str or not left_str or not right_str:
                    print(f"Invalid Line: {line}")
                    continue

                story = Story(
                    description,
                    _leading_int(event_str),
                    _leading_int(left_str),
                    _leading_int(right_str),
                )
                nodes[story.event_number] = Node(story)

        for node in nodes.values():
            node.left = nodes.get(node.data.left_event_number)
            node.right = nodes.get(node.data.right_event_number)

        self.root = nodes.get(1)
        if self.root is None:
            print("Could not find root node\n")

    def play_game(self, infile=None, outfile=None) -> List[Story]:
        """Walk the tree from the root following choices read from infile.

        Returns the stories visited, in order. Play ends when input runs out.
        """
        infile = sys.stdin if infile is None else infile
        outfile = sys.stdout if outfile is None else outfile

        if self.root is None:
            outfile.write("No story")
            return []

        reader = _ChoiceReader(infile)
        current = self.root
        visited = [current.data]

        while True:
            outfile.write(f"{current.data.description}\n")
            if current.is_leaf:
                outfile.write("Game Over!\n")

            outfile.write("choose path:\n")
            if current.left is not None:
                outfile.write("1: Proceed left\n")
            if current.right is not None:
                outfile.write("2: Proceed right\n")
            outfile.write("Type 1 or 2")
            outfile.flush()

            try:
                choice = reader.next_choice()
            except EOFError:
                return visited

            if choice not in (1, 2):
                reader.discard_line()
                outfile.write("Invalid Option. Please enter 1 or 2.\n")
                continue

            following = current.left if choice == 1 else current.right
            if following is None:
                outfile.write("Path does not Exist, Use another path\n")
                continue

            current = following
            visited.append(current.data)