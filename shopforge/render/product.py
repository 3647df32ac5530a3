"""Section builders for product pages."""

from shopforge.schema import NavBar, ProductSection, RelatedProducts, Review, Reviews

from .context import RenderContext
from .landing import accent_button, nav_shell, require
from .nodes import Element, el

FALLBACK_IMAGE = "https://loremflickr.com/1200/1200/product,lifestyle"
MAX_REVIEWS = 3
MAX_RELATED = 4
TRUST_BADGES = ("✓ Free shipping", "✓ Free returns", "✓ 2 year warranty")

SMALL_LABEL = "text-xs font-bold uppercase tracking-[0.3em] mb-3"


def stars(rating: int) -> str:
    """Filled and empty stars for a rating clamped to 1..5."""
    rating = min(5, max(1, int(rating)))
    return "★" * rating + "☆" * (5 - rating)


def build_product_nav(nav: NavBar | None, ctx: RenderContext) -> Element:
    nav = require(nav, "nav")
    cart = el(
        "button",
        "relative px-5 py-2.5 rounded-xl text-sm font-bold flex items-center gap-2 "
        f"{ctx.theme.primary_btn}",
        el("span", "material-symbols-outlined text-sm", "shopping_bag"),
        "Cart",
        el(
            "span",
            "absolute -top-2 -right-2 h-5 w-5 rounded-full bg-black text-[10px] "
            "flex items-center justify-center",
            "2",
        ),
        style={"backgroundColor": ctx.accent},
    )
    return nav_shell(nav, ctx, cart)


def _gallery(section: ProductSection) -> Element:
    main_image = section.images[0] if section.images else FALLBACK_IMAGE
    return el(
        "div",
        "",
        el(
            "img",
            "w-full rounded-2xl object-cover aspect-square mb-4",
            attrs={"src": main_image, "alt": section.title},
        ),
        el(
            "div",
            "grid grid-cols-3 gap-3",
            *(
                el(
                    "img",
                    "w-full rounded-xl object-cover aspect-square cursor-pointer "
                    "hover:opacity-80 transition-opacity",
                    attrs={"src": image, "alt": ""},
                )
                for image in section.images[1:4]
            ),
        ),
    )


def _rating_row(ctx: RenderContext) -> Element | None:
    if not ctx.review_count:
        return None
    t = ctx.theme
    return el(
        "div",
        "flex items-center gap-2 mb-4",
        el("span", t.star_color, "★★★★★"),
        el("span", f"text-sm {t.section_label}", f"({ctx.review_count} reviews)"),
    )


def build_product_section(section: ProductSection | None, ctx: RenderContext) -> Element:
    section = require(section, "productSection")
    t = ctx.theme
    details = el(
        "div",
        "flex flex-col justify-center",
        el("p", f"text-xs uppercase tracking-[0.3em] mb-2 {t.section_label}", "Home / Products"),
        el("h1", f"text-3xl md:text-4xl font-black mb-4 {t.section_heading}", section.title),
        _rating_row(ctx),
        el(
            "div",
            "flex items-baseline gap-3 mb-6",
            el("span", f"text-3xl font-black {t.section_heading}", section.price),
            (
                el("span", f"text-lg line-through {t.section_label}", section.original_price)
                if section.original_price
                else None
            ),
        ),
        el("p", f"text-sm mb-8 leading-relaxed {t.card_text}", section.description),
        el(
            "div",
            "mb-6",
            el("p", f"{SMALL_LABEL} {t.section_label}", "Color"),
            el(
                "div",
                "flex gap-2",
                *(
                    el(
                        "div",
                        "w-8 h-8 rounded-full border-2 border-white/20",
                        style={"backgroundColor": color},
                    )
                    for color in section.colors
                ),
            ),
        ),
        el(
            "div",
            "mb-8",
            el("p", f"{SMALL_LABEL} {t.section_label}", "Size"),
            el(
                "div",
                "flex gap-2",
                *(
                    el("button", f"px-4 py-2 rounded-lg text-sm font-bold {t.secondary_btn}", size)
                    for size in section.sizes
                ),
            ),
        ),
        accent_button(
            ctx, "w-full py-4 rounded-xl font-black text-sm", section.cta_label or "Add to cart"
        ),
        el(
            "div",
            f"flex gap-6 text-xs mt-4 {t.section_label}",
            *(el("span", "", badge) for badge in TRUST_BADGES),
        ),
    )
    return el(
        "section",
        "max-w-6xl mx-auto grid grid-cols-1 lg:grid-cols-2 gap-12",
        _gallery(section),
        details,
        attrs={"id": "details"},
    )


def _review_card(review: Review, ctx: RenderContext) -> Element:
    t = ctx.theme
    return el(
        "div",
        f"rounded-2xl p-6 {t.card_bg}",
        el(
            "div",
            "flex items-center gap-3 mb-4",
            el(
                "img",
                "w-10 h-10 rounded-full object-cover",
                attrs={"src": review.avatar, "alt": review.name},
            ),
            el(
                "div",
                "",
                el("p", f"text-sm font-bold {t.section_heading}", review.name),
                el("p", f"text-xs {t.star_color}", stars(review.rating)),
            ),
        ),
        el("h3", f"text-sm font-semibold mb-2 {t.section_heading}", review.title),
        el("p", f"text-sm leading-relaxed {t.card_text}", review.text),
    )


def build_reviews(reviews: Reviews | None, ctx: RenderContext) -> Element | None:
    if reviews is None or not reviews.reviews:
        return None
    t = ctx.theme
    summary = f"{reviews.average_rating:.1f} · {reviews.review_count} reviews"
    return el(
        "section",
        "max-w-6xl mx-auto mt-16 px-4",
        el(
            "div",
            "flex items-center justify-between mb-8",
            el(
                "div",
                "",
                el("h2", f"text-2xl md:text-3xl font-black mb-1 {t.section_heading}", reviews.heading),
                el("p", f"text-sm {t.card_text}", reviews.summary_text),
            ),
            el(
                "div",
                f"flex items-center gap-2 text-sm {t.card_text}",
                el("span", t.star_color, "★★★★★"),
                el("span", "", summary),
            ),
        ),
        el(
            "div",
            "grid grid-cols-1 md:grid-cols-3 gap-6",
            *(_review_card(review, ctx) for review in reviews.reviews[:MAX_REVIEWS]),
        ),
        attrs={"id": "reviews"},
    )


def build_related_products(related: RelatedProducts | None, ctx: RenderContext) -> Element | None:
    if related is None or not related.items:
        return None
    t = ctx.theme
    cards = (
        el(
            "div",
            "rounded-2xl overflow-hidden hover:-translate-y-1 hover:shadow-lg "
            f"hover:shadow-black/40 transition-all {t.card_bg}",
            el(
                "img",
                "w-full aspect-square object-cover",
                attrs={"src": item.image, "alt": item.title},
            ),
            el(
                "div",
                "p-4 flex flex-col gap-2",
                el("p", f"text-sm font-semibold truncate {t.section_heading}", item.title),
                el("p", f"text-sm {t.card_text}", item.price),
                el("button", f"mt-2 w-full py-2 rounded-lg text-xs font-bold {t.secondary_btn}", "View product"),
            ),
        )
        for item in related.items[:MAX_RELATED]
    )
    return el(
        "section",
        "max-w-6xl mx-auto mt-20 px-4 pb-16",
        el(
            "div",
            "flex items-center justify-between mb-8",
            el("h2", f"text-2xl md:text-3xl font-black {t.section_heading}", related.heading),
        ),
        el("div", "grid grid-cols-1 sm:grid-cols-2 md:grid-cols-4 gap-6", *cards),
        attrs={"id": "related"},
    )
