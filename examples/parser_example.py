"""
Example usage of the Clausewitz parser

This demonstrates how to:
1. Parse a script file from disk
2. Read typed values out of the tree
3. Parse an in-memory buffer
4. Look at the raw tokens
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from clausewitz import Date, InvalidValueError, parse, parse_file, tokenize

SAMPLES_DIR = os.path.join(os.path.dirname(__file__), 'game_samples')


# Example 1: Parse a province history file
print("=" * 60)
print("Example 1: Parsing a province history file")
print("=" * 60)

history = parse_file(os.path.join(SAMPLES_DIR, 'history_sample.txt'))

print(f"\nOwner: {history.get('owner').as_identifier()}")
print(f"Capital: {history.get('capital').as_string()}")
print(f"Base tax: {history.get('base_tax').as_integer()}")
print(f"Base production: {history.get('base_production').as_float()}")
print(f"HRE member: {history.get('hre').as_bool()}")

groups = [v.as_identifier() for v in history.get('discovered_by').as_list()]
print(f"Discovered by: {', '.join(groups)}")

# Dated entries are keyed by Date
for date in (Date(1444, 11, 11), Date(1589, 8, 2)):
    print(f"\n  {date}: {history.get(date).to_python()}")


# Example 2: Typed accessors refuse the wrong kind
print("\n" + "=" * 60)
print("Example 2: Accessing the wrong kind")
print("=" * 60)

try:
    history.get('owner').as_integer()
except InvalidValueError as e:
    print(f"\n{e}")


# Example 3: Parse a save game (magic header, Windows-1252)
print("\n" + "=" * 60)
print("Example 3: Parsing a save game")
print("=" * 60)

save = parse_file(os.path.join(SAMPLES_DIR, 'save_sample.eu4'))

print(f"\nDate: {save.get('date').as_date()}")
print(f"Player: {save.get('player').as_string()}")
print(f"Capital name: {save.get('capital_name').as_string()}")
print(f"DLCs: {[v.as_string() for v in save.get('dlc_enabled').as_list()]}")


# Example 4: In-memory buffers and tokens
print("\n" + "=" * 60)
print("Example 4: Buffers and tokens")
print("=" * 60)

buffer = b'key = "a b,c{d" list = { 1 2, 3 }'
print(f"\nTokens: {tokenize(buffer)}")
print(f"Values: {parse(buffer).to_python()}")


print("\n" + "=" * 60)
print("Examples complete!")
print("=" * 60)
