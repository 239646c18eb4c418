# pocketapps

A handful of small interactive console programs for practice and fun. Each one
asks a few questions on standard input and prints its answer.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command | What it does |
| --- | --- |
| `pocketapps-patterns [ROWS]` | Prints a gallery of star shapes, then four triangles with ROWS rows; asks for the row count if it is not given |
| `pocketapps-quiz` | A six-question solar-system quiz with a score and a remark |
| `pocketapps-rectangle` | Draws a rectangle of a chosen length, height and symbol |
| `pocketapps-rps [--seed N]` | Rock, paper, scissors against the computer, round after round until you choose 4 or input ends; `--seed` makes the computer's moves repeatable |
| `pocketapps-reverse` | Prints the line you type, reversed |
| `pocketapps-palindrome` | Tells you whether the line you type is a palindrome (case-sensitive) |
| `pocketapps-digits` | Adds up the digits of a whole number |
| `pocketapps-table` | Prints the multiplication table of a number from 0 up to a limit, with its sum |
| `pocketapps-grid` | Prints the 10 x 10 times grid |
| `pocketapps-scorecard` | Grades marks in five subjects for 10th or 12th standard and says whether you passed |
| `pocketapps-vectors` | Adds or multiplies component-wise any number of 2-D integer vectors |
| `pocketapps-voting` | Checks whether you can vote and how much tax you still owe |
| `pocketapps-weight` | Shows your weight on the other planets, Pluto, the Moon and the Sun |

Invalid input makes a command print a message and exit with status 1.

## Using the functions

The work behind every command is also available as plain functions:

```python
from pocketapps.text import reverse_text, is_palindrome
from pocketapps.digits import digit_sum
from pocketapps.tables import multiplication_table, table_sum, times_grid
from pocketapps.vectors import Vector, vector_sum, vector_product
from pocketapps.voting import tax_rate, tax_due, voting_advice
from pocketapps.weight import planet_weights
from pocketapps.scorecard import Standard, evaluate
from pocketapps.rock_paper_scissors import Move, judge, Game

reverse_text("hello")                       # "olleh"
is_palindrome("level")                      # True
digit_sum(1234)                             # 10
multiplication_table(3, 4)                  # [0, 3, 6, 9, 12]
vector_sum([Vector(1, 2), Vector(3, 4)])    # Vector(x=4, y=6)
tax_due(500000)                             # 25000.0
judge(Move.ROCK, Move.SCISSORS)             # Outcome.WIN
planet_weights(70.0)["the Moon"]

report = evaluate(Standard.TENTH, [90, 80, 70, 60, 50])
print("\n".join(report.lines()))
```

Other helpers: `pocketapps.patterns.fixed_patterns()` and
`triangle_patterns(rows)` return the shapes as lists of lines;
`pocketapps.quiz.score_answers(answers)` scores six answers and
`grade_comment(score)` gives the remark; `pocketapps.rectangle.rectangle(length, height, symbol)`
returns the rectangle's lines; `pocketapps.scorecard.grade_for(value)` and
`percentage(scores)` grade marks. Functions raise `ValueError` on input outside
their range.