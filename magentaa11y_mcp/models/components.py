"""Component metadata and content models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .enums import Platform


class ComponentMetadata(BaseModel):
    """Indexed metadata for one component document.

    Built once by the directory walk and never mutated afterwards.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Component identifier (filename stem)")
    display_name: str = Field(..., alias="displayName", description="Human-readable name")
    category: str = Field(..., description="Category directory name")
    path: str = Field(..., description="Document path relative to the content root")
    platform: Platform = Field(..., description="Content platform")
    last_modified: datetime = Field(
        ..., alias="lastModified", description="File modification time at index time"
    )
    platforms: list[str] | None = Field(
        default=None, description="Native sub-platforms covered (native only)"
    )


class IOSTokens(BaseModel):
    """iOS accessibility API tokens found in a document."""

    traits: list[str] | None = Field(default=None, description="UIAccessibilityTrait* tokens")
    properties: list[str] | None = Field(
        default=None, description="accessibilityLabel/Hint/Value/Traits/Frame tokens"
    )


class AndroidTokens(BaseModel):
    """Android accessibility API tokens found in a document."""

    classes: list[str] | None = Field(default=None, description="Widget class names")
    properties: list[str] | None = Field(
        default=None, description="contentDescription/stateDescription tokens"
    )


class PlatformTokens(BaseModel):
    """Native platform tokens, keyed by sub-platform."""

    model_config = ConfigDict(populate_by_name=True)

    ios: IOSTokens | None = Field(default=None, alias="iOS")
    android: AndroidTokens | None = Field(default=None, alias="Android")


class ComponentContent(BaseModel):
    """Full component detail assembled per request."""

    model_config = ConfigDict(populate_by_name=True)

    component: str = Field(..., description="Component identifier")
    display_name: str = Field(..., alias="displayName", description="Human-readable name")
    category: str = Field(..., description="Category directory name")
    label: str | None = Field(default=None, description="Front-matter label, if present")
    content: str = Field(..., description="Markdown body with front-matter removed")
    sections: list[str] = Field(default_factory=list, description="Headings (levels 1-3)")
    wcag_criteria: list[str] = Field(
        default_factory=list, alias="wcagCriteria", description="WCAG success criteria codes"
    )
    last_modified: datetime = Field(..., alias="lastModified")
    platforms: PlatformTokens | None = Field(
        default=None, description="iOS/Android API tokens (native only)"
    )
