from typing import List

from app.models.helpline import Helpline

HELPLINES: tuple[Helpline, ...] = (
    Helpline(name="Kisan Call Centre", number="18001801551", number_display="1800-180-1551"),
    Helpline(name="PM-KISAN Helpdesk", number="155261", number_display="155261 / 011-24300606"),
    Helpline(name="Fertilizer Helpline", number="1800115515", number_display="1800-11-5515"),
    Helpline(name="National Seeds Corporation", number="1800110088", number_display="1800-11-0088"),
)


def get_helplines() -> List[Helpline]:
    return list(HELPLINES)
