"""Bus topics and their NATS subject spelling.

Code refers to topics as paths (`/system/tick`); NATS sees dotted subjects
(`system.tick`).
"""


class Topics:
    TICK = "/system/tick"
    STATUS = "/routine/status"

    @classmethod
    def all_topics(cls) -> list[str]:
        return [cls.TICK, cls.STATUS]


def to_nats_subject(topic: str) -> str:
    """`/routine/status` -> `routine.status`"""
    return ".".join(part for part in topic.split("/") if part)


def from_nats_subject(subject: str) -> str:
    """`routine.status` -> `/routine/status`"""
    return "/" + "/".join(subject.split("."))
