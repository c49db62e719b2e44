"""Catalog listing query — immutable value object built from request params."""

from pydantic import BaseModel, ConfigDict, Field

from src.vc_common.enums import CatalogSort
from src.vc_video.domain.repository import VideoDataRequest

DEFAULT_PAGE_SIZE = 16


class CatalogFilterQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    login_member_id: int | None = None
    page: int = Field(0, ge=0)
    size: int = Field(DEFAULT_PAGE_SIZE, ge=1)
    category_name: str | None = None
    sort: CatalogSort | None = None
    subscribe: bool = False
    free: bool | None = None
    is_purchased: bool = True

    def to_data_request(self) -> VideoDataRequest:
        return VideoDataRequest(
            login_member_id=self.login_member_id,
            page=self.page,
            size=self.size,
            category_name=self.category_name,
            sort=self.sort.value if self.sort else None,
            subscribe=self.subscribe,
            free=self.free,
            is_purchased=self.is_purchased,
        )

    def is_default(self) -> bool:
        """True for the listing everyone sees first; that page is cacheable."""
        return (
            self.size == DEFAULT_PAGE_SIZE
            and not self.subscribe
            and self.free is None
            and self.is_purchased
        )

    def __str__(self) -> str:
        sort = self.sort.value if self.sort else None
        return (
            f"CatalogFilterQuery(login_member_id={self.login_member_id}, page={self.page}, "
            f"category_name={self.category_name!r}, sort={sort!r})"
        )
