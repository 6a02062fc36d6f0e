from internest.data.internships import Internship, get_internship_by_id, load_internships

__all__ = [
    "Internship",
    "get_internship_by_id",
    "load_internships",
]
