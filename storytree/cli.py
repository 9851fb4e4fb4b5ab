"""Command that loads a story file and plays it on the terminal."""

from __future__ import annotations

import argparse

from .tree import GameDecisionTree


def main(argv=None) -> int:
    """Load the story file and play it interactively."""
    parser = argparse.ArgumentParser(description="Play a branching story.")
    parser.add_argument("filename", nargs="?", default="story.txt")
    parser.add_argument("-d", "--delimiter", default="|")
    args = parser.parse_args(argv)

    game = GameDecisionTree()
    try:
        game.load_story_from_file(args.filename, args.delimiter)
    except OSError:
        print(f"Could not open file{args.filename}")

    game.play_game()
    return 0