"""Print every key of a small INI file with its line and section."""

from inistream import Handler, Location, parse

INI_FILE = """
;
; This is an example INI file.
;
   file description = A list of users

[user 1]
name=Alice Jones
role=sender

[user 2]

  name = Bob Smith
  role = receiver

[ user 3 ]
name   = Eve
role   = eavesdropper
morals =

; note multiple values
tools = deception
  deceit
  man in the middle attacks

; EOF
"""

comment_lines: list[int] = []


def on_key_value(loc: Location, key: str, values: tuple[str, ...]) -> None:
    for i, value in enumerate(values):
        print(f"{loc.line + i:<2d} {loc.section!r} {key}={value}")


parse(
    INI_FILE,
    Handler(
        on_comment=lambda loc, text: comment_lines.append(loc.line),
        on_key_value=on_key_value,
    ),
)
print("\nComment lines:", comment_lines)
