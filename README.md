# linkedcollections

This package provides a singly linked stack (`LinkedStack`) and a singly linked
queue (`LinkedQueue`). It also has an interactive console menu for trying them
out. The package has no runtime dependencies.

## Installation

```
pip install .
```

## Interactive menu

```
linkedcollections
```

You can also run `python -m linkedcollections.cli`.

The menu prompts are in Portuguese. The main menu has three options:

- `1` starts a stack session.
- `2` starts a queue session.
- `0` exits.

Each session shows its own numbered menu and reads whitespace-separated
integers from standard input. The stack session has these options:

- `1` pushes a value.
- `2` pops a value.
- `3` shows the top value.
- `4` checks whether the stack is empty.
- `5` lists the contents.
- `6` inserts at a position.
- `0` returns to the main menu.

The queue session has the same options, with enqueue, dequeue and the front
value in place of the stack operations. It adds option `7`, which removes at a
position.

An input that is not an integer is reported as invalid. When input runs out,
the session ends quietly.

The menus can also be driven from code through
`linkedcollections.cli.main_menu`, `stack_session` and `queue_session`. Each of
them takes an input stream and an output stream, and falls back to standard
input and output:

```python
import io
from linkedcollections.cli import stack_session

out = io.StringIO()
stack_session(io.StringIO("1 5\n1 7\n5\n0\n"), out)
print(out.getvalue())   # ... "Elementos da pilha: 7 -> 5 -> NULL" ...
```

## Library use

```python
from linkedcollections.stack import LinkedStack, StackEmptyError
from linkedcollections.fifo import LinkedQueue

stack = LinkedStack([1, 2, 3])   # 3 ends up on top
stack.push(4)
stack.insert_at(10, 1)           # position 0 is the top
print(stack)                     # 4 -> 10 -> 3 -> 2 -> 1 -> NULL
stack.pop()                      # 4
stack.peek()                     # 10

queue = LinkedQueue([1, 2, 3])
queue.enqueue(4)
queue.insert_at(9, 0)            # position 0 is the front
queue.remove_at(2)               # 2
queue.front(), queue.back()      # (9, 4)
queue.dequeue()                  # 9
print(queue)                     # 1 -> 3 -> 4 -> NULL
```

Both classes support the following:

- `len()`, truth testing and `is_empty()`.
- `clear()`, which removes every value.
- Iteration, which runs from the top or front to the bottom or back.

For `insert_at`, valid positions run from 0 to the current size.

These errors are raised:

- Popping, peeking or dequeuing from an empty collection raises
  `StackEmptyError` or `QueueEmptyError`. `remove_at` on an empty queue also
  raises `QueueEmptyError`.
- A position outside the collection raises `StackPositionError` or
  `QueuePositionError`.

All four error classes are subclasses of `IndexError`.

## Running the tests

```
pip install .[test]
pytest
```