"""Record model for a single Packages index stanza."""

from pydantic import BaseModel, ConfigDict, Field


class Package(BaseModel):
    """Metadata for one binary package entry of a Packages index.

    Attribute names are snake_case; each carries the control-file field name as
    its alias, so ``model_dump(by_alias=True)`` yields the index's own spelling.
    Fields absent from the stanza keep their empty/zero default.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    package: str = Field(default="", alias="Package")
    priority: str = Field(default="", alias="Priority")
    section: str = Field(default="", alias="Section")
    installed_size: int = Field(default=0, alias="Installed-Size")
    maintainer: str = Field(default="", alias="Maintainer")
    architecture: str = Field(default="", alias="Architecture")
    version: str = Field(default="", alias="Version")
    depends: str = Field(default="", alias="Depends")
    filename: str = Field(default="", alias="Filename")
    size: int = Field(default=0, alias="Size")
    md5sum: str = Field(default="", alias="MD5sum")
    sha1: str = Field(default="", alias="SHA1")
    sha256: str = Field(default="", alias="SHA256")
