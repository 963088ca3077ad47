"""Search response models."""

from pydantic import BaseModel, ConfigDict, Field


class MatchSnippet(BaseModel):
    """A line-level match inside a component body."""

    section: str = Field(..., description="Nearest preceding heading")
    snippet: str = Field(..., description="Surrounding lines, truncated")
    line: int = Field(..., ge=1, description="1-based line number of the match")


class SearchResult(BaseModel):
    """One ranked component in a search response."""

    component: str = Field(..., description="Component identifier")
    category: str = Field(..., description="Category directory name")
    matches: list[MatchSnippet] = Field(default_factory=list, description="Match snippets")
    relevance: float = Field(..., ge=0.0, le=1.0, description="Relevance (1.0 is a perfect match)")


class SearchResponse(BaseModel):
    """Result of a fuzzy search over one platform."""

    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(..., description="The query as received")
    results: list[SearchResult] = Field(default_factory=list)
    total_results: int = Field(
        default=0, ge=0, alias="totalResults", description="Match count before truncation"
    )
