# cloudless

A small toolkit for services that should not care which cloud they run on.
It has three parts:

- **`cloudless.mbus`**: a message bus abstraction. Messages are pushed to a
  `Resource` (a topic, queue or subscription) through a `Service` looked up by
  vendor name. They are consumed through a `Notifier`, which hands each message
  to a `Messenger` together with an `Acknowledgement`.
- **`cloudless.cluster`**: cluster discovery. A `Discovery` names an API and
  the `Criteria` to match instances by. The `DiscoveryService` asks the matcher
  registered for that API and filters the instances it returns by the
  configured health checks: a minimum age and an HTTP probe.
- **`cloudless.container`**: function invocation helpers. It splits an
  invocation URI into function name and method, and models the error document a
  function returns.

The package uses only the standard library.

## Installation

```
pip install cloudless
```

## Message bus

### Messages

`cloudless.mbus.message.Message` carries an `id`, an optional `resource`, a
`trace_id`, `attributes`, a `subject` and `data`.

`payload()` returns the data as bytes:

- `None` when there is no data.
- Text encoded as it is, and bytes passed through unchanged.
- Integers in decimal form, and floats with 32 decimal places.
- Booleans and everything else as compact JSON, with bytes inside written as
  base64.

`to_dict()` and `from_dict()` convert a message to and from its JSON-ready
form, which uses the keys `ID`, `Resource`, `TraceID`, `Attributes`, `Subject`
and `Data`.

```python
from cloudless.mbus.message import Message

message = Message(data={"order": 42})
message.add_attribute("source", "checkout")
print(message.payload())   # b'{"order":42}'
```

A successful push returns a `Confirmation`. Its `message_id` is also its
string form.

### Resources

`cloudless.mbus.resource.Resource` describes a destination or source: `id`,
`name`, `region`, `vendor`, `url`, `type` and optional `credentials`. The
credentials are a `Credentials` holding a secret `url` and `key`.

`Resource.init()` fills in an empty name from the URL. The name becomes the
part after the last `/`, or after the last `:` when there is no `/`.

`decode_resource()` reads the encoded form
`id|name|vendor|type|url[|region|secretURL|secretKey]`. When the text has no
`|`, the fields are separated by `;` instead. It raises `ValueError` when:

- there are fewer than five fields, or
- the type is not `topic`, `queue` or `subscription`.

### Services and the registry

`cloudless.mbus.registry` keeps services and notifiers by vendor name. It
offers `register`, `lookup`, `register_notifier` and `lookup_notifier`.
`lookup` and `lookup_notifier` return `None` for an unknown vendor. A separate
`Registry` instance can also be created and used on its own.

Two vendors come built in. Importing their modules registers them.

- `mem` (`cloudless.mbus.mem`): `MemoryService` puts messages on an in-process
  queue per resource name, created on first use and holding up to 10000
  messages. `singleton()` returns the shared set of queues, and
  `Queues.queue(resource)` returns the `queue.Queue` for a resource.

  Pushing to anything but a `queue` resource raises `ValueError`. Pushing to a
  full queue raises `RuntimeError`. After queuing, the message is given a new
  UUID as its id.
- `fs` (`cloudless.mbus.fs`): `FileService` writes each message as
  `<id>.msg` in the directory named by the resource URL. The URL may be a path
  or a `file://` URL. The file holds the JSON form of the message, and a
  message without an id is given a UUID. `FileNotifier` consumes these files.

```python
from cloudless.mbus import mem, registry
from cloudless.mbus.message import Message
from cloudless.mbus.resource import Resource

service = registry.lookup("mem")
confirmation = service.push(Resource(name="orders", type="queue"), Message(data="hi"))
queued = mem.singleton().queue(Resource(name="orders")).get_nowait()
```

### Notifiers and acknowledgements

Notifier behaviour is set with options from `cloudless.mbus.notifier`:

- `with_resource` names the resource to watch.
- `with_max_messages` caps how many messages are processed at once.

`new_notifier_options` applies options to a fresh `NotifierOptions`.

A `Messenger` implements `on_message(message, ack)`. Call `ack.ack()` when the
message was handled, or `ack.nack()` to reject it. Settling the same
`Acknowledgement` a second time raises `AcknowledgementError`.

`FileNotifier.notify()` (the same as `observe()`) polls the resource directory
and handles each file on its own thread. It blocks until `stop()` is called.
It raises `ValueError` when the resource URL is empty, and `RuntimeError` when
the notifier was already stopped.

For each file:

- If the messenger returns without settling, the message is acknowledged for
  it.
- If the messenger raises, the message is rejected.
- Acknowledged files are deleted.
- A file that cannot be read or decoded is rejected.
- A file rejected more than three times is moved into a `nack` subdirectory.

## Cluster discovery

The data model lives in `cloudless.cluster.model`: `Criteria`, `HealthCheck`,
`Discovery`, `Instance` and `Cluster`.

Matchers are functions from `Criteria` to a list of `Instance`. They are
registered per upper-case API name with `cloudless.cluster.service.register`.
`DiscoveryService.discover()` upper-cases the discovery's `api` before the
lookup and raises `ValueError` for an unknown API.

Two matchers come built in. Importing their modules registers them.

- `LOCAL` (`cloudless.cluster.local`): always a single `localhost` instance at
  `127.0.0.1`.
- `CONSUL` (`cloudless.cluster.consul`): queries the Consul catalog endpoint
  for `criteria.service` at `criteria.url`, which defaults to
  `127.0.0.1:8500`. It keeps the nodes whose combined check status, as
  computed by `aggregated_status`, is `passing`.

```python
import cloudless.cluster.local  # registers LOCAL
from cloudless.cluster.model import Discovery
from cloudless.cluster.service import DiscoveryService

cluster = DiscoveryService().discover(Discovery(api="local"))
print(cluster.instances)
```

Each `HealthCheck` in `Discovery.health_checks` is applied in turn:

- **Age.** Instances younger than `effective_min_age()` are dropped. That is
  `min_age_sec` seconds when it is set, and `min_age` otherwise.
- **HTTP probe.** When `url` is set, `{IP}` in it is replaced by each
  instance's private IP. The probe is tried up to `max_retries` extra times
  with a `timeout_ms` timeout. An instance passes when the response status
  equals `expected_status`.

Instances are probed in parallel. `check_ip` runs the probe for a single IP.

Provider helpers:

- `cloudless.cluster.gcp`:
  - `match_tags`: true when any wanted tag is present.
  - `match_labels`: true when every wanted label has its value.
- `cloudless.cluster.aws`:
  - `build_filters`: turns `key:value` tags into `tag:key` filters, bare tags
    into a `tag-value` filter, and `!`-prefixed tags into exclusions. It adds
    an `availability-zone` filter when one is set.
  - `exclude`: tells whether an instance's `Key`/`Value` tags hit an
    exclusion.
- `cloudless.cluster.lb`: request and response types for load-balancer
  queries. `NodeCountResponses.node_count()` sums the counts.

## Containers

```python
from cloudless.container.invocation import uri_info

name, method = uri_info("/2015-03-31/functions/test/invocations")
# ("test", "invocations")
```

`uri_info` returns `("", "")` when the URI has no `/functions/` part. It
raises `ValueError` when the method is missing.

`FunctionError` is the error document a function reports, with the keys
`errorType`, `errorMessage`, `stackTrace` and a nested `cause`. It converts to
and from a dictionary with `to_dict()` and `from_dict()`.

## What the package does not do

- There is no message bus service for cloud topics or queues. Only the `mem`
  and `fs` vendors exist.
- There is no `AWS` or `GCP` matcher that queries the cloud APIs. Only the
  filter and matching helpers above exist, and no load-balancer query service
  is included.
- There is no local function runtime, HTTP gateway or command-line program.
  `cloudless.container` only parses invocation URIs and models error
  documents.

## Running the tests

```
pip install -e ".[test]"
pytest
```