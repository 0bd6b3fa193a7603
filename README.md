# tonekit

Small building blocks for HTTP services: bundling several errors into one,
capturing call stacks, digests and request signatures, AES-CBC text
encryption, a warming-up rate limiter, pagination, log-friendly SQL rendering,
request/response body capture, settings from environment variables and
chat-robot alerts.

The package depends on `cryptography`; the `test` extra adds `pytest`.

## Errors

`tonekit.pkgerror.aggregate.Aggregate` is an exception holding several
others. `new_aggregate` drops `None` entries and returns `None` when nothing
is left. Its text lists the distinct messages, in brackets when there is more
than one.

```python
from tonekit.pkgerror.aggregate import new_aggregate, flatten, filter_out, reduce_error

agg = new_aggregate([ValueError("a"), None, KeyError("b")])
agg.matches(ValueError)               # True: checks every member and its cause chain
filter_out(agg, lambda e: isinstance(e, ValueError))   # aggregate of the KeyError only
reduce_error(new_aggregate([ValueError("x")]))        # the ValueError itself
```

Also there: `flatten` (collapse nested aggregates),
`aggregate_from_message_counts` (`{"msg": 3}` becomes `"msg (repeated 3 times)"`)
and `aggregate_concurrently(*funcs)`, which runs callables in threads and
bundles what they raise.

`tonekit.pkgerror.stack` captures call sites: `callers(skip)` returns up to 32
`Frame` objects (name, file, line), innermost first. `Frame.short()`,
`Frame.detailed()` and `Frame.marshal_text()` render one frame,
`format_stack(frames)` renders several, and `funcname` strips the package
prefix from a qualified name.

`tonekit.pkgerror.sets.StringSet` is a `set` subclass with `insert`,
`delete`, `has`, `has_all`, `has_any`, `sorted_list` and `pop_any`;
`string_key_set(mapping)` builds one from a mapping with string keys.

## Checksums, encryption and signatures

- `tonekit.utils.checksum`: `md5_checksum`, `md5_hex`, `sha256_checksum`,
  `sha256_hex`, `hmac_sha256`, `hmac_sha256_hex`. Strings are encoded as UTF-8.
- `tonekit.utils.crypto`: AES-CBC with PKCS#7 padding and the IV taken from
  the first 16 bytes of the key. Keys must be 16, 24 or 32 bytes, otherwise
  `ValueError`.

  ```python
  import secrets
  from tonekit.utils.crypto import aes_encrypt_cbc, aes_decrypt_cbc

  key = secrets.token_bytes(32)
  ciphertext = aes_encrypt_cbc("hello", key)   # lower-case hex
  aes_decrypt_cbc(ciphertext, key)             # "hello"
  ```

  `aes_encrypt_cbc_base64` / `aes_decrypt_cbc_base64` use URL-safe base64;
  the decrypting one returns `""` on any failure, and `aes_decrypt_cbc("")`
  returns `""`.
- `tonekit.utils.sign`: `get_sign(params, secret_key)` returns the hex MD5 of
  the parameters' sorted key/value pairs followed by the secret key (a plain
  string is signed as `{"default": text}`). `verify_sign(sign, params,
  secret_key)` raises `SignError` when the signature is missing or wrong.

## Rate limiting and concurrency

`tonekit.utils.ratelimit.WarmingUpRateLimiter(max_token, warm_up_period)`
starts at `max_token // warm_up_period` calls per second (at least 1) and
each second raises the allowance to last second's count plus that step,
capped at `max_token`. `take()` blocks until a token is free. A background
thread calls `tick()` every second unless `auto_tick=False`; `close()` (or
leaving a `with` block) stops it. `set_limit`, `set_warm_up_period` and
`set_limit_and_warming_period` adjust it, `current_status()` returns
`(last_qps, max_token, current_max, warm_up_period)`.

`tonekit.utils.concurrent`: `safely_run(func)` returns the exception `func`
raised, or `None`; `safely_go(func, handle_error)` does the same in a daemon
thread and returns the thread; `ErrorGroup` runs callables with `go()` and
`wait()` re-raises the first failure (also usable as a context manager).

## Conversions and collections

- `tonekit.utils.convert`: `float_to_str`, `parse_int64` (64-bit range,
  `ValueError` otherwise), `parse_float` (0.0 on failure), `parse_str_bool`
  (only `"true"`, `"1"`, `"false"`, `"0"`, else `StrToBoolError`),
  `int_to_bool`, `bool_to_int`, `marshal_to_string` (compact, sorted keys,
  HTML characters escaped), `json_unmarshal` (non-integers as `Decimal`),
  `json_to_str`, `json_to_int`.
- `tonekit.utils.slices`: `set_diff`, `remove_duplicates`, `index_of`,
  `remove_first`, `chunks`, `safe_slice_cut`, `repeat`, `join_values`,
  `almost_equal` (tolerance 1e-9).
- `tonekit.utils.values`: `content_type(file_name)` for a few image, text and
  video extensions, else `application/octet-stream`; `round2`;
  `str_to_float`; `rand_str(length)` of ASCII letters.
- `tonekit.utils.relative_time`: `relative_time(timestamp, now=None)` gives
  Chinese phrases such as `"刚刚"` or `"3 小时前"` (months are 30 days, years
  12 months); `is_weekend`, `time_ago(duration)`, `is_hit_grey(rate)`.

## Pagination and SQL logging

`tonekit.pagination.normalize_page(page, page_size)` clamps the page to at
least 1 and the size to at most 100, defaulting non-positive sizes to 10.
`page_bounds` gives `(offset, limit)`, and `paginate(items, page, page_size,
key=None)` returns a `Page` with `page`, `page_size`, `total`, `items` and
`to_dict()` (keys `page`, `pageSize`, `total`, `items`).

`tonekit.sql_render.render_sql` replaces each `?` in turn with the next
parameter's SQL text:

```python
from tonekit.sql_render import render_sql

render_sql("SELECT * FROM t WHERE name = ? AND id IN ?", ["O'Brien", [1, 2]])
# "SELECT * FROM t WHERE name = 'O''Brien' AND id IN (1,2)"
```

Strings that are common MySQL reserved words are wrapped in backticks
(`is_reserved_word`). `print_sql(sql, params, operation)` and
`print_query_sql`, `print_count_sql`, `print_update_sql`, `print_delete_sql`,
`print_insert_sql` log the result through `logging` and return it.

## Request logging

`tonekit.httplog`:

- `BodyLogWriter(writer, max_size=8192, skip_logging=False)` passes writes
  through and keeps up to `max_size` bytes; `logged_body()` returns that text,
  `"skipLogging"`, or a "too large" marker from 4 KiB upward.
- `PanicWriter(log)` sends everything written to it to a log function.
- `redact_body(body)` removes `password`, `old_password` and `new_password`
  from a JSON object body.
- `describe_request(method, uri, body, content_type="")` builds the log line
  for POST, PATCH, DELETE and PUT requests and returns `None` for others.

## Environment, alerts and signals

- `tonekit.env`: `load(environ=None)` reads `PLATFORM`, `SERVICE`, `ENV`,
  `VERSION`, `ID`, `HOST` and `PORT` (default 80) into `Settings`;
  `Settings.check()` raises `EnvError` for a missing required value and
  defaults the host to `0.0.0.0`. `current()` caches the process settings,
  `environment()` returns the environment name, and
  `env_value(name, default, use_default=True, environ=None)` reads a string,
  integer or boolean.
- `tonekit.lark`: `build_post_message(title, lines)` builds a rich-text
  robot message; `send_post_msg(robot_url, title, lines)` posts it with a
  3-second timeout and returns the response body, or `None` when the URL or
  lines are empty or the request fails; `send_alert(robot_url, name, text)`
  titles the message with the current environment.
- `tonekit.signals`: `wait(*exit_funcs)` blocks in the main thread until
  SIGHUP, SIGQUIT, SIGTERM or SIGINT; termination signals run the exit
  functions and raise `SystemExit(0)`, hang-up is only reported.
  `handle_signal(signum, exit_funcs)` is the reaction to a single signal.

## What is not included

The package has no errors carrying numeric business codes, no registry that
maps such codes to user-facing messages, no JSON reply envelopes for HTTP
handlers and no day-string parsing or day-boundary helpers. It is a library
only: there is no command, no server and no database layer; pagination and
SQL rendering work on plain lists and strings.