import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

import yaml


class Serializer(ABC):
    @abstractmethod
    def encode(self, obj: Any, *args: Any, **kwargs: Any) -> str:
        raise NotImplementedError("not implemented")

    @abstractmethod
    def decode(self, series: str, *args: Any, **kwargs: Any) -> Any:
        raise NotImplementedError("not implemented")

    def encode_to_path(
        self, obj: Any, path: str | Path, *args: Any, **kwargs: Any
    ) -> None:
        with open(path, mode="w", encoding="utf-8") as filehandle:
            filehandle.write(self.encode(obj, *args, **kwargs))

    def decode_from_path(self, path: str | Path, *args: Any, **kwargs: Any) -> Any:
        with open(path, encoding="utf-8") as filehandle:
            contents = filehandle.read()
        return self.decode(contents, *args, **kwargs)


class _json_serializer(Serializer):
    def encode(
        self, obj: Any, *args: Any, indent: int | None = 2, **kwargs: Any
    ) -> str:
        # pylint: disable=arguments-differ
        return json.dumps(obj, *args, indent=indent, **kwargs) + "\n"

    def decode(self, series: str, *args: Any, **kwargs: Any) -> Any:
        return json.loads(series, *args, **kwargs)


class _yaml_serializer(Serializer):
    def encode(self, obj: Any, *args: Any, **kwargs: Any) -> str:
        kwargs.setdefault("sort_keys", False)
        kwargs.setdefault("indent", 2)
        res: str = yaml.safe_dump(obj, *args, **kwargs)
        return res

    def decode(self, series: str, *args: Any, **kwargs: Any) -> Any:
        return yaml.safe_load(series)
