"""
Pages Router - Pages HTML statiques du parcours de paiement.

Responsabilite unique:
----------------------
Servir la page d'accueil (bouton "Pay"), la page de succes (bouton
vers le portail client) et la page d'annulation.

Endpoints:
----------
- GET /: Formulaire POST vers /create-checkout-session
- GET /success.html: Formulaire POST vers /create-portal-session
- GET /cancel.html: Paiement annule
"""

from html import escape

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from src.presentation.api.config import APISettings, get_settings


router = APIRouter(tags=["Pages"])


_LAYOUT = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
</head>
<body>
{body}
</body>
</html>
"""


def _page(title: str, body: str) -> HTMLResponse:
    return HTMLResponse(_LAYOUT.format(title=escape(title), body=body))


@router.get("/", response_class=HTMLResponse, summary="Page d'accueil")
def index(settings: APISettings = Depends(get_settings)):
    """Page avec le bouton de paiement."""
    return _page(
        "Stripe Payment Test",
        f"""    <h1>Welcome to Stripe Payment Test</h1>
    <form action="/create-checkout-session" method="POST">
        <input type="hidden" name="lookup_key" value="{escape(settings.checkout_lookup_key)}">
        <button id="payButton" type="submit">Pay with Stripe</button>
    </form>""",
    )


@router.get("/success.html", response_class=HTMLResponse, summary="Paiement reussi")
def success(session_id: str = ""):
    """Page de retour apres paiement, avec acces au portail client."""
    return _page(
        "Subscription confirmed",
        f"""    <h1>Subscription confirmed</h1>
    <form action="/create-portal-session" method="POST">
        <input type="hidden" name="session_id" value="{escape(session_id)}">
        <button id="portalButton" type="submit">Manage your billing information</button>
    </form>""",
    )


@router.get("/cancel.html", response_class=HTMLResponse, summary="Paiement annule")
def cancel():
    """Page affichee si le paiement est annule."""
    return _page(
        "Checkout canceled",
        """    <h1>Checkout canceled</h1>
    <p><a href="/">Back to plans</a></p>""",
    )
