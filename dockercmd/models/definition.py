"""Command definition model."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CommandDefinition(BaseModel):
    """How to run one containerized command.

    Deserialized from ``<definitions dir>/<command>.json``. Field names in the
    file are PascalCase and matched case-insensitively; any other key is
    rejected.
    """

    model_config = ConfigDict(extra="forbid")

    image: Optional[str] = Field(None, alias="Image", description="Image containing the command")
    name: Optional[str] = Field(None, alias="Name", description="Base name for the container")
    interactive: bool = Field(True, alias="Interactive", description="Attach an interactive terminal")
    mount_cwd: Optional[str] = Field(
        None, alias="MountCwd", description="Mount point for the current working directory"
    )
    persist_container: bool = Field(
        False, alias="PersistContainer", description="Keep the container after the command exits"
    )
    publish_tcp_ports: List[int] = Field(
        default_factory=list, alias="PublishTcpPorts", description="TCP ports to publish on the host"
    )
    share_host_pids: bool = Field(
        False, alias="ShareHostPids", description="Use the host's pid namespace"
    )

    @model_validator(mode="before")
    @classmethod
    def _match_field_names(cls, data: Any) -> Any:
        """Map keys onto the declared aliases regardless of case."""
        if not isinstance(data, dict):
            return data

        aliases = {
            field.alias.lower(): field.alias
            for field in cls.model_fields.values()
            if field.alias
        }
        matched = {}
        for key, value in data.items():
            if isinstance(key, str):
                key = aliases.get(key.lower(), key)
            # Keys differing only in case collapse; the last one wins
            matched[key] = value
        return matched

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the on-disk dictionary form."""
        return self.model_dump(by_alias=True)
