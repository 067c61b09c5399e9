from typing import List
from portfolio_builder.extensions import db
from portfolio_builder.models.portfolio import Portfolio
from portfolio_builder.utils.audit import log_action
from portfolio_builder.utils.media import delete_file
from portfolio_builder.utils.transaction import transactional


MEDIA_FIELDS = ("hero_image_url", "profile_photo_url", "resume_url")


def delete_portfolio(
    *,
    portfolio: Portfolio,
    actor_id: str,
) -> None:
    """
    Hard-delete a portfolio with its tracks, gallery items and messages.

    Stored media files are removed after the transaction commits.
    """
    media_to_cleanup: List[str] = [
        url for url in (getattr(portfolio, field) for field in MEDIA_FIELDS) if url
    ]
    for track in portfolio.tracks:
        media_to_cleanup.extend(url for url in (track.audio_url, track.thumbnail_url) if url)
    media_to_cleanup.extend(item.image_url for item in portfolio.gallery_items)

    portfolio_id = portfolio.id

    with transactional():
        db.session.delete(portfolio)

        log_action(
            action="portfolio.delete",
            entity_type="portfolio",
            entity_id=portfolio_id,
            actor_id=actor_id,
            payload={"slug": portfolio.slug},
        )

    # Cleanup media outside transaction
    for media_url in media_to_cleanup:
        delete_file(media_url)
