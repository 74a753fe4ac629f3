# practicekit

A collection of small, self-contained pieces of Python:

- **Algorithm exercises** (`practicekit.algorithms`): binary search,
  duplicate detection, character counting, Fibonacci, longest common prefix,
  palindromes, Roman numerals, bracket validation, simple sorts and more.
- **Linked lists**: a singly linked `LinkedList`
  (`practicekit.linked_list`) and a `DoublyLinkedList`
  (`practicekit.doubly_linked_list`).
- **Transaction trees** (`practicekit.transactions`): build and walk a tree
  of transactions linked by their previous-transaction hash.
- **Concurrency helpers** (`practicekit.concurrency`): wrap plain and
  blocking work as awaitables and run several of them together.
- **HTTP fetching** (`practicekit.fetch`): fetch several JSON posts
  concurrently with `httpx`.
- **Two small JSON web services** built with Starlette: an in-memory users
  API (`practicekit.users_api`) and a questions-and-answers API stored in
  SQLite (`practicekit.qa_app`, `practicekit.qa_handlers`,
  `practicekit.qa_persistence`, `practicekit.qa_models`).

## Installation

```console
pip install practicekit
```

To run the test suite, install the test extra:

```console
pip install "practicekit[test]"
pytest
```

## Algorithms

```python
from practicekit.algorithms import (
    search, fibonacci, roman_to_int, is_valid_brackets,
    longest_common_prefix, insertion_sort,
)

search([1, 3, 5, 7], 5)                              # 2
fibonacci(5)                                         # [0, 1, 1, 2, 3]
roman_to_int("MCMXCIV")                              # 1994
is_valid_brackets("([]{})")                          # True
longest_common_prefix(["flower", "flow", "flight"])  # "fl"

numbers = [4, 6, 3, 1, 2]
insertion_sort(numbers)
numbers                                              # [1, 2, 3, 4, 6]
```

Also available: `contains_duplicate`, `contains_duplicate_hashed`,
`count_chars`, `is_palindrome_text`, `is_palindrome_number`,
`repeated_string`, `sock_pairs`, `selection_sort`, `sum_of_digits` and
`two_sum`.

A few points of behaviour:

- `search` returns `None` when the value is absent.
- `fibonacci` always returns at least `[0, 1]` and raises `OverflowError`
  once a value would not fit in an unsigned 32-bit integer.
- `longest_common_prefix` and `repeated_string` raise `ValueError` for an
  empty list and an empty string respectively; `sum_of_digits` raises
  `ValueError` for a negative number.
- `roman_to_int` ignores characters that are not Roman numerals.
- `two_sum` returns `[]` when no pair adds up to the target.

## Linked lists

```python
from practicekit.linked_list import LinkedList
from practicekit.doubly_linked_list import DoublyLinkedList

items = LinkedList()
items.push_back(1)
items.push_back(2)
items.insert_at_ith(1, 4)
list(items)          # [1, 4, 2]
items.pop_back()     # 2
items.display()      # prints and returns "1 -> 4 -> None"

chain = DoublyLinkedList()
chain.insert_at_tail("A")
chain.insert_at_tail("B")
chain.get(1)         # "B"
len(chain)           # 2
str(chain)           # "A, B"
```

Both lists accept an iterable of initial items, support `len()` and
iteration, and return `None` from `get` for an index with no node. Popping
or deleting from an empty list returns `None`. Inserting past the end raises
`IndexError`; on `DoublyLinkedList`, `delete_ith(len(chain))` removes the
tail.

## Transaction trees

```python
from practicekit.transactions import (
    load_transactions, build_transaction_tree, iterate_transactions_tree,
)

transactions = load_transactions(json_text)
root, tree = build_transaction_tree(transactions)
for node in iterate_transactions_tree(root, tree):
    print(node.tx_hash, node.amount)
```

`load_transactions` parses a JSON array of objects with the fields
`previous_tx_hash`, `amount`, `from_did`, `to_did`, `issued_at`,
`expiry_at`, `tx_hash` and `signed_tx_hash`, and raises `ValueError` when
one is missing or of the wrong type. A transaction whose `previous_tx_hash`
is `null` is taken as the root (`""` if there is none); every other
transaction is attached as a child of the one it points back to.
`iterate_transactions_tree` yields nodes depth first, parents before
children.

## Concurrency helpers

```python
import asyncio
from practicekit.concurrency import async_function, join_tasks, run_blocking, sleep_task

async def demo():
    doubled = await async_function(5)          # 10
    return await join_tasks(
        sleep_task("1", 0.1),
        run_blocking(lambda: "done"),
    )                                          # ["1", "done"]

asyncio.run(demo())
```

`join_tasks` cancels the remaining work and re-raises if any of its
awaitables fails.

## Fetching posts

`fetch_posts(ids, client=None)` requests every post at once from a public
JSON placeholder service and returns the decoded bodies in the order of the
ids. Pass your own `httpx.AsyncClient` to control the transport.

## Web services

### Users API

```python
from practicekit.users_api import UserStore, create_app

app = create_app(UserStore())
```

| Method   | Path          | Result                                     |
|----------|---------------|--------------------------------------------|
| `GET`    | `/users`      | every user                                 |
| `GET`    | `/users/{id}` | the user, or `404`                         |
| `POST`   | `/users`      | the new user                               |
| `PUT`    | `/users/{id}` | the updated user, or `404`                 |
| `DELETE` | `/users/{id}` | the removed user, or `404`                 |

`POST` and `PUT` take a JSON body `{"id": ..., "name": ..., "email": ...}`
with the `application/json` content type (otherwise `404`). The `id` in the
body must be a non-negative integer but is not used: a new user's id is one
more than the number of users currently stored. A malformed body gives
`400`, a body with wrong fields `422`.

### Questions-and-answers API

```python
from practicekit.qa_persistence import connect, init_schema, QuestionsDaoImpl, AnswersDaoImpl
from practicekit.qa_app import create_app

db = connect("qa.db")
init_schema(db)
app = create_app(QuestionsDaoImpl(db), AnswersDaoImpl(db))
```

| Method   | Path         | JSON body                          | Result             |
|----------|--------------|------------------------------------|--------------------|
| `POST`   | `/question`  | `title`, `description`             | the stored question |
| `GET`    | `/questions` | none                               | every question     |
| `DELETE` | `/question`  | `question_uuid`                    | empty `200`        |
| `POST`   | `/answer`    | `question_uuid`, `content`         | the stored answer  |
| `GET`    | `/answers`   | `question_uuid`                    | the question's answers |
| `DELETE` | `/answer`    | `answer_uuid`                      | empty `200`        |

Creating an answer with a malformed or unknown question UUID gives `400`
with the reason; any other storage failure gives `500` with a generic
message. A body that is not a JSON object of strings gives `422`. Deleting a
question also deletes its answers. Every response carries permissive CORS
headers, and `OPTIONS` requests get an empty `200`.

The service functions in `practicekit.qa_handlers` work over any
implementation of the `QuestionsDao` and `AnswersDao` abstract classes and
raise `BadRequestError` or `InternalError`, both subclasses of
`HandlerError`.

## Commands

| Command             | What it does                                                        |
|---------------------|---------------------------------------------------------------------|
| `practicekit-tree [FILE]` | Builds and walks a transaction tree from a JSON file, or a built-in sample |
| `practicekit-list`  | Runs a fixed sequence of operations on a singly linked list         |
| `practicekit-tasks [--scale N]` | Runs several timed tasks concurrently; `--scale` multiplies the delays |
| `practicekit-fetch [ID ...]` | Fetches posts (1 to 10 by default) and prints them as JSON |
| `practicekit-users [--host H] [--port P]` | Serves the users API (default `127.0.0.1:8000`) |
| `practicekit-qa [--host H] [--port P]` | Serves the questions-and-answers API |

`practicekit-qa` reads `DATABASE_URL` from the environment or a `.env`
file. It names an SQLite database file, optionally written as
`sqlite:///path`; the tables are created if missing.

## What the package does not do

- The users API keeps its users in memory only; they are lost when the
  server stops.
- The questions-and-answers API stores its data in SQLite only; it has no
  support for other database servers, and no authentication.