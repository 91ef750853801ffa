from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ServerInfo:
    name: str
    version: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "version": self.version}


@dataclass(frozen=True)
class Resource:
    uri: str
    name: str
    description: str
    mime_type: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "uri": self.uri,
            "name": self.name,
            "description": self.description,
            "mimeType": self.mime_type,
        }


@dataclass(frozen=True)
class Tool:
    name: str
    description: str
    input_schema: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }


@dataclass(frozen=True)
class Manifest:
    protocol_version: str
    server_info: ServerInfo
    resources: tuple[Resource, ...]
    tools: tuple[Tool, ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            "protocolVersion": self.protocol_version,
            "serverInfo": self.server_info.to_dict(),
            "capabilities": {
                "resources": [r.to_dict() for r in self.resources],
                "tools": [t.to_dict() for t in self.tools],
            },
        }


@dataclass(frozen=True)
class ResourceResponse:
    uri: str
    mime_type: str
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"uri": self.uri, "mimeType": self.mime_type, "text": self.text}


@dataclass(frozen=True)
class ToolResponse:
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"content": [{"type": "text", "text": self.text}]}

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "ToolResponse":
        blocks = payload.get("content") or []
        if not blocks:
            return cls(text="")
        return cls(text=str(blocks[0].get("text", "")))
