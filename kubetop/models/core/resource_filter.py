"""Request-scoped filter shared by the list views."""

from pydantic import BaseModel, ConfigDict

from kubetop.constants.enums import StatusRank


class ResourceFilter(BaseModel):
    """Filter applied to node, pod and event listings.

    Empty strings and ``None`` mean "all".
    """

    model_config = ConfigDict(frozen=True)

    namespace: str = ""
    node: str = ""
    status: StatusRank | None = None
    event_type: str = ""

    def matches_status(self, rank: StatusRank) -> bool:
        return self.status is None or self.status == rank
