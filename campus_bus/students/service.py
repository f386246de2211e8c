import logging
import re

from campus_bus.config import Settings
from campus_bus.exceptions import InvalidInputError
from campus_bus.storage import Storage
from campus_bus.students.schemas import Student, StudentCreate

logger = logging.getLogger(__name__)

class StudentService:
    def __init__(self, store: Storage, settings: Settings):
        self.store = store
        self.settings = settings
        self._college_id_re = re.compile(settings.college_id_pattern)
    
    def validate_college_id(self, college_id: str) -> str:
        """Return the college ID unchanged or raise InvalidInputError"""
        if not isinstance(college_id, str) or not self._college_id_re.fullmatch(college_id):
            prefix = self.settings.COLLEGE_ID_PREFIX
            digits = self.settings.COLLEGE_ID_DIGITS
            example = prefix + "2024001".zfill(digits)[-digits:]
            raise InvalidInputError(
                f"College ID must be in format {prefix} followed by {digits} digits (e.g., {example})"
            )
        return college_id
    
    def authenticate(self, college_id: str) -> Student:
        """Get the student for a college ID, registering it on first use"""
        college_id = self.validate_college_id(college_id)
        
        student = self.store.get_student_by_college_id(college_id)
        if student:
            return student
        
        try:
            student = self.store.create_student(StudentCreate(college_id=college_id))
        except ValueError:
            # Registered concurrently by another request
            student = self.store.get_student_by_college_id(college_id)
            if not student:
                raise
            return student
        
        logger.info("Registered student %s (%s)", student.college_id, student.id)
        return student
