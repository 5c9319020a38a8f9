from pydantic import BaseModel, ConfigDict, computed_field


class Helpline(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    number: str
    number_display: str

    @computed_field
    @property
    def dial_uri(self) -> str:
        return f"tel:{self.number}"
