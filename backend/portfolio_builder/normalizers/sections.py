# portfolio_builder/normalizers/sections.py
"""
Per-section renderers for the portfolio page.

Each renderer turns the content fields of one section into the JSON
payload the page client draws. Renderers only ever see the fields their
section declares in the registry.
"""
from typing import Any, Dict, Mapping

from portfolio_builder.domain.sections.dispatch import SectionRenderer
from portfolio_builder.domain.sections.registry import SectionId
from portfolio_builder.utils.json_fields import safe_get_array

SOCIAL_PLATFORMS = ("twitter", "instagram", "linkedin", "github", "website", "youtube")


def render_hero(content, title, view_options):
    return {
        "heading": content.get("hero_title"),
        "subtitle": content.get("hero_subtitle"),
        "image_url": content.get("hero_image_url"),
        "cta_buttons": safe_get_array(content.get("hero_cta_buttons")),
    }


def render_about(content, title, view_options):
    return {
        "artist_name": content.get("artist_name"),
        "text": content.get("about_text"),
        "photo_url": content.get("profile_photo_url"),
    }


def render_tracks(content, title, view_options):
    return {
        "tracks": safe_get_array(content.get("tracks")),
        "audio_player_mode": view_options.get("audio_player_mode", "bottom"),
    }


def render_gallery(content, title, view_options):
    return {"items": safe_get_array(content.get("gallery_items"))}


def _list_renderer(field_name: str) -> SectionRenderer:
    def render(content, title, view_options):
        return {"items": safe_get_array(content.get(field_name))}

    render.__name__ = f"render_{field_name}"
    return render


def render_resume(content, title, view_options):
    return {"resume_url": content.get("resume_url")}


def render_social_links(content, title, view_options):
    return {
        "links": [
            {"platform": platform, "url": content[f"{platform}_url"]}
            for platform in SOCIAL_PLATFORMS
            if content.get(f"{platform}_url")
        ]
    }


def render_contact(content, title, view_options):
    return {
        "description": content.get("contact_description"),
        "email": content.get("contact_email"),
        "phone": content.get("contact_phone"),
        "location": content.get("contact_location"),
    }


def _flag(content: Mapping[str, Any], name: str) -> bool:
    # Unset visibility flags mean "show"
    return content.get(name) is not False


def render_footer(content, title, view_options):
    data: Dict[str, Any] = {
        "text": content.get("footer_text"),
        "copyright": content.get("footer_copyright_text"),
    }
    if _flag(content, "footer_show_about_summary"):
        data["about_summary"] = content.get("footer_about_summary")
    if _flag(content, "footer_show_links"):
        data["links"] = safe_get_array(content.get("footer_links_json"))
    if _flag(content, "footer_show_social_links"):
        data["social_links"] = safe_get_array(content.get("footer_social_links_json"))
    return data


SECTION_RENDERERS: Dict[str, SectionRenderer] = {
    SectionId.HERO.value: render_hero,
    SectionId.ABOUT.value: render_about,
    SectionId.TRACKS.value: render_tracks,
    SectionId.GALLERY.value: render_gallery,
    SectionId.PRESS.value: _list_renderer("press_json"),
    SectionId.SKILLS.value: _list_renderer("skills_json"),
    SectionId.TESTIMONIALS.value: _list_renderer("testimonials_json"),
    SectionId.HOBBIES.value: _list_renderer("hobbies_json"),
    SectionId.KEY_PROJECTS.value: _list_renderer("key_projects_json"),
    SectionId.SPONSORS.value: _list_renderer("sponsors_json"),
    SectionId.RESUME.value: render_resume,
    SectionId.SOCIAL_LINKS.value: render_social_links,
    SectionId.CONTACT.value: render_contact,
    SectionId.FOOTER.value: render_footer,
}
