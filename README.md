# arrowhead

Building blocks for systems that take part in an Arrowhead-style local
cloud: a settings record, checks for incoming messages and request paths,
and a reader for INI files.

Nothing outside the standard library is needed.

## Installing

```
pip install .
```

## Settings

`arrowhead.config.ArrowheadConfig` is a dataclass holding the settings a
system must share with the core systems. Every field has an empty or false
default:

- service: `service_name`, `interface`, `service_uri`, `unit`, `security`
- core: `access_uri`
- orchestration flags: `override_store`, `matchmaking`, `metadata_search`,
  `ping_providers`, `only_preferred`, `external_service_request`
- this system: `this_system_name`, `this_address`, `this_port`
- target system: `target_system_name`, `target_address`, `target_port`
- security: `secure_arrowhead_interface`, `secure_provider_interface`,
  `public_key_path`, `private_key_path`, `authentication_info`

```python
from arrowhead.config import ArrowheadConfig

config = ArrowheadConfig(
    service_name="counter_example",
    service_uri="counter",
    interface="JSON",
    unit="int",
    this_system_name="counter_provider",
    this_address="127.0.0.1",
    this_port=8460,
)
```

## Validation

`arrowhead.validation` has two checks. Both return a bool and log an error
when the check fails.

- `correct_service(obj, service_name)` is true when `obj` has a
  `ServiceName` field equal to `service_name`. `obj` may be a mapping or a
  JSON document given as `str` or `bytes`; text that is not valid JSON, or
  JSON that is not an object, fails the check.
- `correct_uri(uri, expected)` is true when `uri` is exactly `"/" + expected`.

```python
from arrowhead.validation import correct_service, correct_uri

correct_service({"ServiceName": "counter_example"}, "counter_example")  # True
correct_service('{"ServiceName": "other"}', "counter_example")         # False
correct_uri("/counter", "counter")                                       # True
```

## Reading INI files

`arrowhead.iniload` reads INI text into an `arrowhead.inidict.IniDictionary`:

- `load(path)` reads a file, `loads(text, name)` reads a string.
- Each section is stored as the key `"section"` with the value `None`, each
  entry as `"section:key"`. Section names and keys are lower-cased; values are
  kept as written, without surrounding blanks, quotes or trailing `;`/`#`
  comments.
- A line ending in a backslash continues on the next line.
- A physical line must fit in 1023 characters; a longer one raises
  `IniSyntaxError`. A line that is neither empty, a comment, a section nor a
  `key = value` pair also raises `IniSyntaxError`, unless a later section or
  value line is read successfully.
- `parse_line(line)` classifies a single line and returns a `ParsedLine`
  with a `LineStatus` and the section, key or value found.

`arrowhead.iniparser` queries the result. Keys are matched in lower case.

- `get_string(d, key, default)`, `get_int(d, key, notfound)`,
  `get_double(d, key, notfound)`, `get_boolean(d, key, notfound)`.
  Integers are read as C literals, so `"042"` gives 34 and `"0x42"` gives 66.
  `get_boolean` gives 1 for values starting with `y`, `Y`, `t`, `T` or `1`,
  0 for `n`, `N`, `f`, `F` or `0`, and `notfound` otherwise.
- `find_entry`, `set_entry`, `unset_entry`
- `section_count`, `section_name`, `section_key_count`, `section_keys`
- `dump(d, out)` writes `[key]=[value]` lines; `dump_ini(d, out)` and
  `dump_section_ini(d, section, out)` write text that can be loaded again.

```python
from arrowhead import iniload, iniparser

d = iniload.loads("[Server]\nPort = 0x1F90\nSecure = yes\n")
iniparser.get_int(d, "server:port", 80)         # 8080
iniparser.get_boolean(d, "SERVER:secure", 0)     # 1
iniparser.section_keys(d, "server")              # ['server:port', 'server:secure']
```

`IniDictionary` itself is an ordered mapping with `get`, `set`, `unset`,
`dump`, `len()`, `in` and iteration over keys. `dictionary_hash(key)` gives
the 32-bit one-at-a-time hash of a string.

## What this package does not do

It holds no HTTP client or server, does not register services with a
service registry, and has no ready-made provider or consumer. It does not
read `ArrowheadConfig` from a file: settings are passed to the dataclass
directly. There is no command-line program.

## Running the tests

```
pip install .[test]
pytest
```