from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequestRef:
    owner: str
    repo: str
    number: int
    head_sha: str

    def __post_init__(self):
        if not self.owner.strip() or not self.repo.strip():
            raise ValueError("Owner and repository are required.")
        if self.number <= 0:
            raise ValueError(f"Invalid pull request number: {self.number}")

    @property
    def identifier(self) -> str:
        return f"{self.owner}/{self.repo}#{self.number}"
