from __future__ import annotations

from flask import current_app, render_template, request

from keeplater.extensions import db
from keeplater.services.share import AlreadySaved, Rejected, ShareQuery, ingest
from keeplater.services.store import SqlEntryStore
from keeplater.web import web_bp


@web_bp.route("/share", methods=["GET"])
def share():
    """Share-sheet target. Saves the shared URL without authentication."""
    outcome = ingest(ShareQuery.from_args(request.args), SqlEntryStore(db.session))

    if isinstance(outcome, Rejected):
        return (
            render_template(
                "share.html", heading="Error", message="No valid URL found"
            ),
            400,
        )

    if isinstance(outcome, AlreadySaved):
        current_app.logger.info("Shared URL already saved: %s", outcome.entry.url)
        heading = "Already Saved"
    else:
        current_app.logger.info("Saved shared URL: %s", outcome.entry.url)
        heading = "Saved"
    return render_template("share.html", heading=heading, message=outcome.entry.url)
