"""演讲记录数据源"""

from typing import AsyncIterator

from ..models.speaking import SpeakingEngagement

ENGAGEMENTS: tuple[SpeakingEngagement, ...] = (
    SpeakingEngagement(
        title="Presentation of avsi job app",
        kind="talk",
        event="3Shape Meetup",
        date="2019-05-24",
        event_url="https://facebook.com/Lifeat3shape",
        presentation_url=(
            "https://slideshare.net/CalebSabila/"
            "caleb-sabila-writing-parsers-in-c-3shape-meetup"
        ),
    ),
    SpeakingEngagement(
        title="Reality-Driven Testing Using TestContainers",
        kind="talk",
        event=".flutter community",
        date="2023-12-13",
        event_url="https://flutter.com",
        presentation_url=(
            "https://slideshare.net/CalebSabila/"
            "realitydriven-testing-using-testcontainers"
        ),
        recording_url="https://youtube.com/",
    ),
)


async def load_speaking_engagements() -> AsyncIterator[SpeakingEngagement]:
    """和项目数据源保持同样的异步迭代接口"""
    for engagement in ENGAGEMENTS:
        yield engagement
