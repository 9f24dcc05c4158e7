# lcli

A Python library for working with the LinkedIn REST API. It has four parts:

- `lcli.model` — dataclasses for posts, comments, reactions, organizations,
  profiles, media uploads and paging, plus the error classes.
- `lcli.linkedin` — service classes that build requests, send them through a
  `Doer` you supply, and turn the replies into model objects.
- `lcli.config` — application settings and OAuth tokens stored as JSON files
  under `~/.config/lcli/`.
- `lcli.output` — printing results as JSON, YAML or an aligned text table.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Services

Each service takes a `Doer`: any object with a method
`do(method, path, body)` that sends the request (with `body`, when not
`None`, as JSON) and returns a `lcli.linkedin.base.Response`
(`status_code`, `body` as bytes, `headers` as a dict).

| Module | Class | Methods |
| --- | --- | --- |
| `lcli.linkedin.post` | `PostService` | `create`, `get`, `delete`, `list_by_author` |
| `lcli.linkedin.comment` | `CommentService` | `create`, `list`, `delete` |
| `lcli.linkedin.reaction` | `ReactionService` | `react`, `unreact`, `list` |
| `lcli.linkedin.org` | `OrgService` | `get`, `get_by_vanity`, `follower_stats`, `page_stats` |
| `lcli.linkedin.media` | `MediaService` | `init_upload`, `upload`, `get_status` |
| `lcli.linkedin.analytics` | `AnalyticsService` | `post_analytics`, `profile_views` |
| `lcli.linkedin.profile` | `ProfileService` | `me`, `get_by_id` |

Two calls do not go through the `Doer`: `MediaService.upload` sends a `PUT`
of the bytes (or the contents of a binary file object) straight to the
upload URL, and `ProfileService.me` requests the OpenID Connect userinfo
endpoint with the access token given to the service (the URL can be changed
with the `userinfo_url` argument).

```python
from lcli.linkedin.base import Response
from lcli.linkedin.post import PostService
from lcli.model import CreatePostRequest


class CannedDoer:
    """Answers every request with the same reply."""

    def do(self, method, path, body=None):
        return Response(201, b"", {"X-Restli-Id": "urn:li:share:123"})


posts = PostService(CannedDoer())
post = posts.create(CreatePostRequest(text="Hello", visibility="PUBLIC"))
print(post.id)  # urn:li:share:123
```

## Errors

Every error about LinkedIn derives from `lcli.model.LinkedInError`.
A non-2xx reply is raised as `APIError`, which carries `status_code`,
`message`, `code` and `trace_id`. An `APIError` is also an instance of the
class for its status code, so it can be caught either way:

| Status | Class |
| --- | --- |
| 401 | `UnauthorizedError` |
| 403 | `ForbiddenError` |
| 404 | `NotFoundError` |
| 429 | `RateLimitedError` |
| 500 and above | `ServerError` |

`OrgService.get_by_vanity` raises `NotFoundError` when no organization
matches. A reply body that cannot be decoded raises `ValueError`, and an
unsupported media type passed to `MediaService.init_upload` raises
`ValueError` too.

```python
from lcli.model import NotFoundError

try:
    posts.get("urn:li:share:123")
except NotFoundError as err:
    print(err)  # e.g. "linkedin api 404: not found"
```

## Configuration and tokens

```python
from lcli import config

cfg = config.load()          # defaults when config.json does not exist
cfg.client_id = "my-app-id"
config.save(cfg)

tok = config.load_token()    # None when tokens.json does not exist
if tok is None or not tok.valid():
    ...
```

`Config` holds `client_id`, `client_secret`, `redirect_uri` (default
`http://localhost:8484/callback`) and `api_version` (default `202601`).
`Token` holds `access_token`, `refresh_token`, `expires_at` and `scopes`;
`Token.valid()` is false when the access token is empty or expires within
five minutes. `config.config_dir()` returns `~/.config/lcli`, creating it if
needed; both files are written readable by their owner only.

## Output

```python
import sys
from lcli.output import Format, Printer, parse_format

printer = Printer(sys.stdout, parse_format("table"))
printer.print_table(["ID", "Name"], [["1", "Alice"], ["2", "Bob"]])

Printer(sys.stdout, Format.YAML).print({"key": "value"})
```

`Printer.print` writes JSON or YAML according to the format and raises
`ValueError` for the table format, which goes through `print_table`.
Model dataclasses are written with their API field names (`createdAt`,
`vanityName`, ...). `parse_format` accepts `json`, `table` and `yaml` and
raises `ValueError` for anything else. `Table` can also be used directly:
`Table("ID", "Name")`, `add_row(...)`, `render(stream)`.

## What this package does not do

- It has no command-line program; it is a library only.
- It does not perform the OAuth sign-in or token refresh; it only stores and
  checks tokens you already have.
- It has no HTTP client for the main REST API: you supply the `Doer` that
  adds the base URL, authorization and version headers and sends requests.