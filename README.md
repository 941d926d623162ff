# patternbook

A collection of small, runnable object-oriented designs. Each module shows
one idea: a SOLID principle, a classic design pattern, or a compact domain
model built from several patterns working together.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Shows |
| --- | --- |
| `patternbook.chess_board` | Chess pieces with their own movement rules, a piece factory and the board |
| `patternbook.file_visitors` | The visitor pattern over text, image and video files |
| `patternbook.quickcommerce` | Dark stores, inventory, replenishment strategies and split-order fulfilment |
| `patternbook.quickcommerce_simple` | A slimmer quick-commerce model whose stock removal clamps at zero |
| `patternbook.food_models` / `patternbook.food_app` | A food-ordering app: carts, orders, order factories, payment strategies |
| `patternbook.dependency_inversion` | A service depending on a database abstraction versus one coupled to concrete databases |
| `patternbook.interface_segregation` | Separate 2D and 3D shape interfaces |
| `patternbook.substitution` | Substitution rules: pre/postconditions, invariants, history, exceptions, return types |
| `patternbook.channel` | The observer pattern as a video channel with subscribers |
| `patternbook.robots` | Robots composed from walk, talk and fly behaviours |
| `patternbook.burgers` | A simple burger factory and an abstract factory for meals |
| `patternbook.document_editor` | A document editor before and after splitting its responsibilities |

## Command-line demos

Each of these runs a short scripted scenario and prints what happens:

```
patternbook-files                 # size, compression and virus-scan visitors over sample files
patternbook-food                  # search, cart, checkout and payment
patternbook-quickcommerce         # an order split across nearby dark stores
patternbook-quickcommerce-simple  # a single order in the slimmer model
```

## Using it from Python

A chess board set up for a new game:

```python
from patternbook.chess_board import Board, Position

board = Board()
pawn = board.piece_at(Position(6, 4))
print(pawn, Position(6, 4).to_chess_notation())     # WP e2
print(pawn.possible_moves(Position(6, 4), board))   # one and two squares forward
board.move_piece(Position(6, 4), Position(4, 4))
print(board.render())
```

Visiting files (each visitor returns a line describing what it did):

```python
from patternbook.file_visitors import ImageFile, CompressionVisitor

ImageFile("sample.jpg").accept(CompressionVisitor())
# 'Compressing IMAGE file: sample.jpg'
```

Ordering food:

```python
from patternbook.food_app import TomatoApp
from patternbook.food_models import UpiPaymentStrategy, User

app = TomatoApp()
user = User(1, "Asha", "Delhi")
app.select_restaurant(user, app.search_restaurants("delhi")[0])
app.add_to_cart(user, "P1")
order = app.checkout_now(user, "Delivery", UpiPaymentStrategy("upi-handle"))
app.pay_for_order(user, order)
```

Rendering a document:

```python
from patternbook.document_editor import Document, DBStorage, DocumentEditor

editor = DocumentEditor(Document(), DBStorage())
editor.add_text("Hello, world!")
editor.add_new_line()
editor.add_image("picture.jpg")
print(editor.render_document())
```

## What it does not do

- The chess module covers pieces and the board only. There is no game on
  top of it: no turns, no players or matches, no check, checkmate or
  stalemate detection, and `possible_moves` ignores whether a move would
  leave the king in check. Castling, en passant and promotion are not
  modelled, and there is no chess command-line demo.
- Everything is kept in memory. `DBStorage` holds saved documents in a
  list; only `FileStorage` and `NaiveDocumentEditor.save_to_file` write to
  disk.
- Payments only print and return a description; no money moves anywhere.