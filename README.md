# cerberus

Building blocks for a Redis cluster proxy. The package is plain Python and
has no third-party dependencies. The poller and the socket helpers need Linux.

## Modules

- `cerberus.errors`: the exception hierarchy and two shared constants.
  - `VERSION` is the version string. `CLUSTER_SLOT_COUNT` is `16384`.
  - `ProxyError` is a subclass of `RuntimeError` and the base of every other
    error here.
  - `BadRedisMessage(token)` takes either a byte value or a message. A byte
    value is rendered as `Unexpected token X (88)`.
  - `SystemCallError(what, errcode)` keeps `errcode` and a `stack_trace`
    string.
  - `UnknownHost(host)` reports `(empty string)` when the host is empty.
  - The I/O family is `IOErrorBase`, `ConnectionHungUp`,
    `IOFailure(what, errcode)`, `SocketAcceptError(errcode)` and
    `ConnectionRefused(host, port, errcode)`.
  - `error_message(errcode)` returns the system's text for an errno value.
- `cerberus.strutil`: string helpers.
  - `strnieq(lhs, rhs, n)` compares at most `n` characters without regard to
    case.
  - `stristartswith(s, pre)` is a prefix test that ignores case.
  - `atoi(a)` parses a decimal integer. Whitespace around it is allowed.
    Anything else raises `BadRedisMessage`.
  - `to_str(value)` renders a value: booleans as `true`/`false`, floats with
    `%g`, and `timedelta` as seconds.
  - `split_str(s, delimiters=" ", trim_empty=False)` splits at every
    delimiter character.
  - `join(sep, values)` joins strings with a separator.
- `cerberus.address`: `Address`, a frozen host/port pair that sorts by host
  and then by port. It has two parsers:
  - `Address.from_host_port("host:port")` also accepts `host:port@busport`.
  - `Address.from_hosts_ports("a:1,b:2")` returns a set and skips empty items.

  Both raise `ValueError` on bad or empty input. `str(addr)` gives
  `host:port`.
- `cerberus.alg`: two sequence helpers.
  - `erase_if(items, predicate)` removes items from a list in place.
  - `max_element(items, key)` returns the first item with the largest key, or
    `None` when there are no items.
- `cerberus.randomutil`: `random_init()` seeds the module's generator from the
  current time. `randint(low, high)` returns a value in `[low, high)`.
- `cerberus.logsetup`: `init()` reconfigures the root logger. It sets the
  format to time, one-letter level, thread name and message, at INFO level.
- `cerberus.sysio`: file-descriptor I/O. The calls are `read(fd, count)`,
  `write(fd, data)`, `writev(fd, buffers)`, `close(fd)` and `accept(accfd)`.
  `accept` returns the new descriptor or raises `SocketAcceptError`.
- `cerberus.netutil`: socket setup on raw descriptors.
  - `new_stream_socket()` creates a socket.
  - `set_nonblocking(fd)` and `set_tcpnodelay(fd)` set socket options.
  - `connect_fd(host, port, fd)` connects to an IPv4 address. A connect that
    is still in progress counts as success. It raises `UnknownHost` or
    `ConnectionRefused`.
  - `bind_to(fd, port)` binds on all interfaces with address and port reuse,
    then listens with a backlog of `LISTEN_BACKLOG`.
- `cerberus.poller`: an edge-triggered epoll wrapper.
  - `Poller` has `add_read`, `add_write`, `set_read`, `set_write`, `delete`,
    `wait(max_events=1024, timeout=-1)`, `close` and a `closed` property. It
    can also be used as a context manager.
  - `wait` returns `PollEvent(events, data)` objects. `data` is whatever was
    registered with the descriptor. The timeout is in milliseconds, and an
    interrupted wait returns an empty list.
  - `event_is_read`, `event_is_write` and `event_is_hup` test an event mask.

## Examples

```python
from cerberus.address import Address

addr = Address.from_host_port("127.0.0.1:7000@17000")
print(addr)          # 127.0.0.1:7000

remotes = Address.from_hosts_ports("10.0.0.1:7000,10.0.0.2:7001")
```

```python
from cerberus.netutil import new_stream_socket, bind_to, set_nonblocking
from cerberus.poller import Poller, event_is_read

fd = new_stream_socket()
set_nonblocking(fd)
bind_to(fd, 8889)

with Poller() as poller:
    poller.add_read(fd, "acceptor")
    for event in poller.wait(1024, 1000):
        if event_is_read(event.events):
            print("incoming connection for", event.data)
```

## What the package does not do

The package provides only the pieces listed above. It has no proxy server
and no command-line program. It does not parse or write Redis protocol
messages, and it keeps no cluster slot map and does no request routing.

## Running the tests

```
pip install -e .[test]
pytest
```