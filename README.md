# ettu

The backend of a project management and collaboration platform: a small
Starlette application with a health check, a metrics endpoint and a versioned
API status route, a pooled database connection built on SQLAlchemy, and the
data models for users, projects, tasks, notes and snippets.

## What is inside

- `ettu.models.common`: `ApiResponse`, `PaginationParams` and
  `PaginatedResponse`.
  - `ApiResponse.from_data`, `from_data_with_message` and `from_error` build
    the envelope with `success`, `data`, `message` and `error`.
  - `PaginationParams.default()` gives page 1, limit 20, order `desc`.
    `current_page()` defaults to 1, `page_size()` defaults to 20 and is capped
    at 100, `sort_field()` defaults to `created_at`, `sort_order()` to `desc`.
    `offset()` is `(page - 1) * page_size` and raises `ValueError` for a page
    below 1.
  - `PaginatedResponse.create(items, total, page, limit)` works out
    `total_pages` by ceiling division and raises `ValueError` when `limit` is
    not positive.
- `ettu.models.user`: `User`, whose `user_type` and `role` are stored as text.
  `parsed_user_type()` maps it to `UserType` (`guest`, `registered`,
  `migrated`; anything else counts as `guest`), `parsed_role()` to `UserRole`
  (`user`, `reviewer`, `moderator`, `admin`, `restricted`; anything else
  counts as `user`). `is_guest()`, `is_registered()` (registered or migrated),
  `can_login()` (registered with a password hash) and `into_response()`, which
  gives a `UserResponse` without the password hash or settings. Also
  `CreateUserRequest`, `UpdateUserRequest`, `UserSession`, `LoginRequest`,
  `LoginResponse`, `RegisterRequest` and `GuestToUserMigrationRequest`.
- `ettu.models.project`: `Project` with `parsed_status()` (`ProjectStatus`,
  unknown text counts as `active`), `parsed_visibility()`
  (`ProjectVisibility`, unknown text counts as `private`),
  `technology_list()` (the string entries of a stored list, otherwise empty)
  and `into_response()`, which gives a `ProjectResponse`. Also
  `CreateProjectRequest`, `UpdateProjectRequest`, `ProjectMember` and
  `ProjectInvitation`.
- `ettu.models.content`: `Note`, `Task` and `Snippet`, each with its create
  and update request.
- `ettu.database`: `Database.connect(url)` creates a SQLAlchemy pool (20
  connections, no overflow, 30 second acquire timeout, connections recycled
  after 1800 seconds, pre-ping on checkout) and opens one connection to check
  it; `health_check()` runs `SELECT 1`; `close()` disposes of the pool; the
  object also works as a context manager, and `engine` exposes the pool.
  Failures raise `DatabaseError`. `generate_id()` returns a random UUID and
  `parse_uuid(text)` parses one, raising `ValueError` on bad input.
- `ettu.app`: `AppState` (an optional `db` and a `config` mapping) and
  `build_router(state)`, which returns the Starlette application.

All the models are plain dataclasses taking keyword arguments, and the enums
are string enums whose `str()` is their lower-case value.

## Endpoints

| Path             | Method | Answer                                                   |
|------------------|--------|----------------------------------------------------------|
| `/health`        | GET    | JSON with `status`, `timestamp`, `version` and `database` |
| `/metrics`       | GET    | `# No metrics collected` as plain text                   |
| `/api/v1/status` | GET    | `API is running`                                         |

`/health` answers 200 with `database` set to `not_configured` when the state
has no database, 200 with `connected` when the check passes, and 503 with
`status` `unhealthy`, `database` `disconnected` and the error text when it
fails. CORS allows any origin and header, and the methods GET, POST, PUT,
DELETE and PATCH.

## Example

```python
from starlette.testclient import TestClient

from ettu.app import AppState, build_router
from ettu.database import Database

db = Database.connect("sqlite:///:memory:")
app = build_router(AppState(db=db))

with TestClient(app) as client:
    print(client.get("/health").json()["database"])  # connected

db.close()
```

Paging in a handler:

```python
from ettu.models.common import ApiResponse, PaginatedResponse, PaginationParams

params = PaginationParams.default()
page = PaginatedResponse.create(["a", "b", "c"], 45, params.current_page(), params.page_size())
body = ApiResponse.from_data(page)
```

Here `page.total_pages` is 3.

## What it does not do

- There is no command to start a server. `build_router` returns an ASGI
  application; serve it with an ASGI server of your choice, which is not a
  dependency of this package.
- There are no login, registration, user, project, task, note or snippet
  endpoints yet: the models exist, but only the three routes above are served.
- No tables are created and no schema migrations are run; `Database` only
  manages the connection pool and its health check.
- The metrics endpoint collects nothing.

## Tests

The tests in `tests/` use pytest and httpx, both installed with the `test`
extra.