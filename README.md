# storytree

A small text adventure. It reads a story from a text file and plays it as a
binary decision tree. At each event you pick the left path (1) or the right
path (2).

## Installing

```
pip install .
```

## Story file format

Each line describes one event. It has four fields separated by a
single-character delimiter, which is `|` by default:

```
<event number>|<description>|<left event number>|<right event number>
```

For example:

```
1|You stand at a fork in the road.|2|3
2|A quiet forest path leads to a cabin.|-1|-1
3|A rocky trail climbs into the hills.|-1|-1
```

- The game starts at event `1`. If there is no event `1`, "Could not find root
  node" is printed and there is no story to play.
- A child number that matches no event in the file means there is no path
  that way.
- Lines with an empty event, left or right field are printed as
  `Invalid Line: ...` and skipped.
- Number fields are read from their leading integer, so `12 ` or `12abc`
  count as `12`. A field that does not start with an integer raises
  `ValueError`.
- If two lines share an event number, the later one wins.

## Playing

Put a file named `story.txt` in the current directory and run:

```
storytree
```

Or name the file, and a different delimiter if it uses one:

```
storytree my_story.txt --delimiter ";"
```

If the file cannot be opened, the command prints a message and then reports
"No story".

The game prints each event's description, the paths you can take and the
prompt `Type 1 or 2`. Type `1` to go left or `2` to go right. Any other input
is rejected with "Invalid Option. Please enter 1 or 2." and the rest of that
line is dropped. Choosing a path that does not exist prints "Path does not
Exist, Use another path" and you stay where you are.

When an event has no paths, "Game Over!" is printed. The prompt still comes
up, but there is nowhere left to go. Play ends when input runs out, for
example on end-of-file (Ctrl-D).

## Using it from Python

```python
import io
from storytree.tree import GameDecisionTree

game = GameDecisionTree()
game.load_story_from_file("story.txt", "|")
out = io.StringIO()
visited = game.play_game(io.StringIO("1\n"), out)
print([story.event_number for story in visited])
```

- `GameDecisionTree.load_story_from_file(filename, delimiter="|")` builds the
  tree and sets `root`. It raises `ValueError` if the delimiter is not a single
  character, and `OSError` if the file cannot be opened.
- `GameDecisionTree.play_game(infile=None, outfile=None)` reads choices from
  `infile` (standard input by default) and writes to `outfile` (standard output
  by default). It returns the list of `Story` events visited, in order, and
  returns an empty list when there is no root.

`storytree.story` holds the data types:

- `Story` — a dataclass with `description`, `event_number`,
  `left_event_number` and `right_event_number` (defaults `""`, `0`, `-1`,
  `-1`).
- `Node` — a tree node with `data`, `left` and `right`, and an `is_leaf`
  property that is true when it has no children.

## What it does not do

There is no saving or restoring of progress, and no way to step back to an
earlier event. A story is read once from a single file.