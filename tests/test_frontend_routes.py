"""
End-to-end tests for the HTML routes served by pokecatalog/catalog/pages.py:
    GET /                 → filter sidebar + card grid
    GET /partials/grid    → HTMX swap target for filter changes
    GET /partials/card    → one card fragment

The upstream API is replaced by the ``upstream`` fixture from conftest.py.
"""

from conftest import (
    BASE,
    BULBASAUR_URL,
    CATALOG_URL,
    CHARMANDER_URL,
    category_payload,
    detail_payload,
)


def _cards(html: str) -> int:
    return html.count('class="card-slot"')


# ── Index page ────────────────────────────────────────────────────────────────

class TestIndex:
    def test_renders_one_card_per_entry(self, client, starter_upstream):
        resp = client.get("/")
        assert resp.status_code == 200
        assert _cards(resp.text) == 2
        assert 'data-name="bulbasaur"' in resp.text
        assert 'data-name="charmander"' in resp.text
        assert starter_upstream.calls == [CATALOG_URL]

    def test_cards_load_through_their_own_fragment(self, client, starter_upstream):
        html = client.get("/").text
        assert html.count('hx-get="/partials/card?') == 2
        assert 'hx-swap="outerHTML"' in html

    def test_renders_fixed_checklist(self, client, starter_upstream):
        html = client.get("/").text
        assert html.count('<input type="checkbox"') == 18
        assert '<label for="fairy">Fairy</label>' in html
        assert "background: #EE8130" in html
        assert " checked" not in html

    def test_grid_requests_replace_older_ones(self, client, starter_upstream):
        html = client.get("/").text
        # 18 checkboxes + "Show all" share one sync scope on the sidebar
        assert html.count('hx-sync="closest .filter-section:replace"') == 19
        assert html.count('hx-target="#pokemon-grid"') == 19

    def test_every_checkbox_enforces_single_selection(self, client, starter_upstream):
        html = client.get("/").text
        assert html.count('onchange="selectOnly(this)"') == 18
        assert 'onclick="selectOnly(null)"' in html
        assert "querySelectorAll('.filter-sidebar input[type=\"checkbox\"]')" in html
        assert "cb.checked = false;" in html
        assert "if (checkbox) { checkbox.checked = true; }" in html

    def test_failed_catalog_shows_error_and_no_cards(self, client, upstream):
        resp = client.get("/")
        assert resp.status_code == 200
        assert "Failed to load Pokemon" in resp.text
        assert _cards(resp.text) == 0
        assert '<input type="checkbox"' not in resp.text

    def test_entry_without_url_renders_empty_card(self, client, upstream):
        upstream.payloads[CATALOG_URL] = {"results": [{"name": "ghostly", "url": ""}]}
        html = client.get("/").text
        assert "No data" in html
        assert "/partials/card?" not in html


# ── Grid fragment ─────────────────────────────────────────────────────────────

class TestGridPartial:
    def test_filter_caps_at_twenty(self, client, upstream):
        upstream.payloads[f"{BASE}/type/fire"] = category_payload("fire", 45)
        resp = client.get("/partials/grid", params={"category": "fire"})
        assert resp.status_code == 200
        assert _cards(resp.text) == 20
        assert 'data-name="fire-20"' in resp.text
        assert 'data-name="fire-21"' not in resp.text

    def test_filter_issues_exactly_one_type_request(self, client, upstream):
        upstream.payloads[f"{BASE}/type/water"] = category_payload("water", 3)
        client.get("/partials/grid", params={"category": "water"})
        assert upstream.calls == [f"{BASE}/type/water"]

    def test_small_category_shows_all_members(self, client, upstream):
        upstream.payloads[f"{BASE}/type/dragon"] = category_payload("dragon", 7)
        resp = client.get("/partials/grid", params={"category": "dragon"})
        assert _cards(resp.text) == 7

    def test_failed_filter_answers_no_content(self, client, upstream):
        resp = client.get("/partials/grid", params={"category": "ghost"})
        assert resp.status_code == 204
        assert resp.text == ""

    def test_unknown_category_is_rejected(self, client, upstream):
        resp = client.get("/partials/grid", params={"category": "shadow"})
        assert resp.status_code == 400
        assert upstream.calls == []

    def test_without_category_shows_full_catalogue(self, client, starter_upstream):
        resp = client.get("/partials/grid")
        assert resp.status_code == 200
        assert _cards(resp.text) == 2

    def test_without_category_keeps_grid_when_catalogue_fails(self, client, upstream):
        assert client.get("/partials/grid").status_code == 204


# ── Card fragment ─────────────────────────────────────────────────────────────

class TestCardPartial:
    def test_bulbasaur_scenario(self, client, starter_upstream):
        resp = client.get("/partials/card", params={"name": "bulbasaur", "url": BULBASAUR_URL})
        html = resp.text
        assert resp.status_code == 200
        assert 'data-state="loaded"' in html
        assert '<div class="pokedex-number">#1</div>' in html
        assert 'src="img1"' in html
        assert '<div class="pokemon-name">bulbasaur</div>' in html
        assert html.count('class="type-dot"') == 2
        assert "background-color: #7AC74C" in html
        assert "background-color: #A33EA1" in html
        assert starter_upstream.calls == [BULBASAUR_URL]

    def test_unknown_type_dot_is_gray(self, client, upstream):
        upstream.payloads[BULBASAUR_URL] = detail_payload(1, "odd", "img", "grass", "bird")
        html = client.get("/partials/card", params={"url": BULBASAUR_URL}).text
        assert html.count('class="type-dot"') == 2
        assert "background-color: #AAA" in html

    def test_failed_detail_shows_error(self, client, starter_upstream):
        resp = client.get("/partials/card", params={"name": "charmander", "url": CHARMANDER_URL})
        assert resp.status_code == 200
        assert 'data-state="failed"' in resp.text
        assert "Error!" in resp.text

    def test_empty_url_never_fetches(self, client, upstream):
        html = client.get("/partials/card", params={"name": "bulbasaur", "url": ""}).text
        assert "No data" in html
        assert 'data-state="empty"' in html
        assert upstream.calls == []

    def test_foreign_url_is_not_proxied(self, client, upstream):
        html = client.get("/partials/card", params={"url": "http://169.254.169.254/latest/"}).text
        assert "Error!" in html
        assert upstream.calls == []

    def test_sibling_cards_are_isolated(self, client, starter_upstream):
        failed = client.get("/partials/card", params={"url": CHARMANDER_URL}).text
        loaded = client.get("/partials/card", params={"url": BULBASAUR_URL}).text
        assert 'data-state="failed"' in failed
        assert 'data-state="loaded"' in loaded
        assert '#1' in loaded
