"""Registration of the OAuth path on a FastAPI application or router"""

import logging
from typing import Union

from fastapi import APIRouter, FastAPI, Request

from .authorization import begin_authorization
from .callback import handle_callback
from .models import OAuthPathOptions

logger = logging.getLogger(__name__)


def setup_twitch_oauth_path(app: Union[FastAPI, APIRouter], options: OAuthPathOptions) -> OAuthPathOptions:
    """Bind the OAuth flow to the path of ``options.redirect_uri``

    A GET without ``code`` starts the flow; a GET with ``code`` completes it.
    The host must install session middleware before requests arrive.

    Args:
        app: FastAPI application or APIRouter to register on
        options: Configuration of the OAuth path

    Returns:
        The options the path was registered with
    """

    async def oauth_path(request: Request):
        if request.query_params.get("code"):
            return await handle_callback(request, options)
        return begin_authorization(request, options)

    app.add_api_route(
        options.path,
        oauth_path,
        methods=["GET"],
        include_in_schema=False,
        name="twitch_oauth_path",
    )
    logger.info(f"Registered OAuth path {options.path}")
    return options
