from dataclasses import dataclass, asdict


@dataclass
class TimeEntry:
    time: str
    comment: str
    ticket_ref: str
    timestamp: int
    date: str

    def to_record(self) -> dict:
        record = asdict(self)
        record['ticketRef'] = record.pop('ticket_ref')
        return record

    @classmethod
    def from_record(cls, record: dict):
        return cls(time=record['time'],
                   comment=record['comment'],
                   ticket_ref=record.get('ticketRef') or '',
                   timestamp=int(record['timestamp']),
                   date=record['date'])
