"""
Line sources for the read-print loop: each is just an iterator of text lines, newlines removed.
"""
from pathlib import Path
from typing import Iterator, TextIO

PROMPT = "? "

def terminal_lines(prompt:str=PROMPT) -> Iterator[str]:
	""" Prompt for each line, until the user signals end-of-file. """
	while True:
		try: yield input(prompt)
		except EOFError: return

def stream_lines(stream:TextIO) -> Iterator[str]:
	for line in stream:
		yield line.rstrip("\n")

def file_lines(path:Path) -> Iterator[str]:
	with open(path, "r", encoding="utf-8") as fh:
		yield from stream_lines(fh)
