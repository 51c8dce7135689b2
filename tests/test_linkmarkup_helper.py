from __future__ import annotations

from linkmarkup import HelperConfig, UrlHelper


def test_helper_binds_context_and_config(resolver) -> None:
    helper = UrlHelper.for_request(
        resolver,
        lambda: "/feeds/index",
        config=HelperConfig(button_class="inline"),
    )

    assert helper.url_for({"controller": "feeds"}) == "/feeds"
    assert helper.link_to("Edit", {"controller": "feeds", "action": "edit", "id": 3}) == (
        '<a href="/feeds/edit/3">Edit</a>'
    )
    assert helper.button_to("Go", "/go") == (
        '<form method="post" action="/go" class="inline"><div><input type="submit" value="Go" /></div></form>'
    )
    assert helper.link_image_to("rss", "/feed") == '<a href="/feed"><img src="/images/rss.png" alt="Rss" /></a>'
    assert helper.mail_to("me@x.com") == '<a href="mailto:me@x.com">me@x.com</a>'


def test_helper_conditional_links(resolver) -> None:
    helper = UrlHelper.for_request(resolver, lambda: "/feeds/index")

    assert helper.current_page({"controller": "feeds", "action": "index"}) is True
    assert helper.link_to_unless_current("Feeds", {"controller": "feeds", "action": "index"}) == "Feeds"
    assert helper.link_to_unless(False, "Show", "/show") == '<a href="/show">Show</a>'
    assert helper.link_to_if(False, "Show", "/show") == "Show"


def test_default_helper_handles_literal_urls() -> None:
    helper = UrlHelper()
    assert helper.link_to("Home", "/") == '<a href="/">Home</a>'
