"""Options a user can pass to ``start``."""

from pydantic import BaseModel, ConfigDict, Field


class UpdateOptions(BaseModel):
    """Requested update behaviour.

    ``cleanup`` and ``greedy`` only take effect together with ``upgrade``.
    """

    model_config = ConfigDict(extra="forbid")

    upgrade: bool = Field(False, description="Run `brew upgrade` after updating")
    cleanup: bool = Field(False, description="Run `brew cleanup` after upgrading")
    greedy: bool = Field(False, description="Also upgrade casks that update themselves")

    def effective_flags(self) -> list[str]:
        """CLI flags that actually change the launcher, in launcher order."""
        if not self.upgrade:
            return []
        flags = ["--upgrade"]
        if self.greedy:
            flags.append("--greedy")
        if self.cleanup:
            flags.append("--cleanup")
        return flags
