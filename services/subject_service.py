from dtos import SubjectRegistry
from utils.exceptions import InvalidSubject

FCS = "fcs"
BE = "be"
SUBJECTS = (FCS, BE)


class SubjectService:
    def __init__(self, registry: SubjectRegistry):
        self.registry = registry

    @staticmethod
    def validate(subject: str) -> str:
        if subject in SUBJECTS:
            return subject
        raise InvalidSubject(
            f'Unknown subject "{subject}", only "{FCS}" and "{BE}" are supported'
        )

    def resolve(self, subject: str) -> int:
        """Return the Fakturoid subject id for a subject code."""
        subject = self.validate(subject)
        if subject == BE:
            return self.registry.be
        return self.registry.fcs
