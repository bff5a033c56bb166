from os import path
from typing import Union


def file_content(filepath: Union[str, None]) -> Union[str, None]:
    if filepath is not None and path.isfile(filepath):
        with open(filepath, "r", encoding="utf-8") as file:
            return file.read()
    return None


def non_empty(value: Union[str, None]) -> Union[str, None]:
    if value is None or len(value.strip()) == 0:
        return None
    return value
