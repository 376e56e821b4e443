"""
Section generators, grouped by template family.

Each table maps a placeholder name to a callable taking the whole record and
returning the section fragment ('' when nothing renders). A template population
uses exactly one of these tables.
"""

from cvpress.sections import listing, timeline, typeset
from cvpress.sections.builtin import generate_builtin_cv

LIST_GENERATORS = {
    'contactInfo': listing.contact_info_html,
    'education': lambda r: listing.education_html(r.education),
    'experience': lambda r: listing.experience_html(r.experience),
    'volunteer': lambda r: listing.volunteer_html(r.volunteer),
    'publications': lambda r: listing.publications_html(r.publications),
    'skills': lambda r: listing.skills_html(r.skills),
    'languages': lambda r: listing.languages_html(r.languages),
    'projects': lambda r: listing.projects_html(r.projects),
    'awards': lambda r: listing.awards_html(r.awards),
    'hobbies': lambda r: listing.hobbies_html(r.hobbies),
}

TIMELINE_GENERATORS = {
    'contactInfo': listing.contact_info_html,
    'education': lambda r: timeline.education_timeline(r.education),
    'experience': lambda r: timeline.experience_timeline(r.experience),
    'volunteer': lambda r: timeline.volunteer_timeline(r.volunteer),
    'skills': lambda r: timeline.skills_items(r.skills),
    'hobbies': lambda r: timeline.hobbies_items(r.hobbies),
    'awards': lambda r: timeline.awards_timeline(r.awards),
    'links': timeline.links_timeline,
}

TYPESET_GENERATORS = {
    'contactInfo': typeset.contact_info_tex,
    'education': lambda r: typeset.education_tex(r.education),
    'experience': lambda r: typeset.experience_tex(r.experience),
    'volunteer': lambda r: typeset.volunteer_tex(r.volunteer),
    'publications': lambda r: typeset.list_tex(r.publications),
    'skills': lambda r: typeset.list_tex(r.skills),
    'languages': lambda r: typeset.languages_tex(r.languages),
    'projects': lambda r: typeset.projects_tex(r.projects),
    'awards': lambda r: typeset.awards_tex(r.awards),
    'hobbies': lambda r: typeset.list_tex(r.hobbies),
}

__all__ = [
    'LIST_GENERATORS',
    'TIMELINE_GENERATORS',
    'TYPESET_GENERATORS',
    'generate_builtin_cv',
]
