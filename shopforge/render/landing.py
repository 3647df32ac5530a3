"""Section builders for landing pages.

Each builder takes its section value (None when absent) and the render
context, and returns an Element or None when the section is omitted.
Builders for contract-required sections raise RenderError instead.
"""

from shopforge.core.errors import RenderError
from shopforge.schema import (
    CtaBanner,
    Faq,
    Features,
    Footer,
    Hero,
    LogoBar,
    NavBar,
    Newsletter,
    Pricing,
    PricingTier,
    Stats,
    Team,
    Testimonials,
)

from .context import RenderContext
from .nodes import Element, el

LABEL = "text-xs font-bold uppercase tracking-[0.3em] mb-3"
HEADING = "text-3xl md:text-4xl font-black"
BADGE = (
    "inline-flex items-center px-3 py-1 rounded-full text-[10px] font-bold "
    "tracking-[0.2em] bg-amber-500/10 text-amber-300 border border-amber-400/40 mb-4"
)


def require(section, key: str):
    if section is None:
        raise RenderError(f"Missing required section: {key}")
    return section


def section_header(ctx: RenderContext, label: str, heading: str, spacing: str = "mb-16") -> Element:
    t = ctx.theme
    return el(
        "div",
        f"text-center {spacing}",
        el("p", f"{LABEL} {t.section_label}", label),
        el("h2", f"{HEADING} {t.section_heading}", heading),
    )


def accent_button(ctx: RenderContext, class_name: str, label: str) -> Element:
    return el(
        "button",
        f"{class_name} {ctx.theme.primary_btn}",
        label,
        style={"backgroundColor": ctx.accent},
    )


def nav_links(nav: NavBar, ctx: RenderContext) -> Element:
    t = ctx.theme
    return el(
        "div",
        "hidden md:flex items-center gap-8",
        *(
            el(
                "a",
                f"text-sm font-medium {t.nav_text} {t.nav_hover} transition-colors",
                link.label,
                attrs={"href": link.href or "#"},
            )
            for link in nav.links
        ),
    )


def nav_shell(nav: NavBar, ctx: RenderContext, action: Element) -> Element:
    t = ctx.theme
    return el(
        "nav",
        f"fixed top-0 w-full z-50 backdrop-blur-md border-b {t.nav_border} {t.nav_bg}",
        el(
            "div",
            "max-w-6xl mx-auto px-4 h-16 flex items-center justify-between",
            el("span", "text-xl font-black", nav.logo),
            nav_links(nav, ctx),
            action,
        ),
    )


def build_nav(nav: NavBar | None, ctx: RenderContext) -> Element:
    nav = require(nav, "nav")
    button = accent_button(ctx, "px-5 py-2.5 rounded-xl text-sm font-bold", nav.cta_label)
    return nav_shell(nav, ctx, button)


def build_hero(hero: Hero | None, ctx: RenderContext) -> Element:
    hero = require(hero, "hero")
    t = ctx.theme
    return el(
        "section",
        f"min-h-[80vh] flex flex-col items-center justify-center text-center px-4 {t.hero_bg}",
        el(
            "div",
            "max-w-5xl mx-auto",
            el("p", f"text-xs font-bold tracking-[0.3em] mb-4 {t.section_label}", "HERO"),
            el("h1", f"text-5xl md:text-7xl font-black mb-6 {t.hero_headline}", hero.headline),
            el("p", f"text-lg md:text-2xl mb-10 max-w-2xl mx-auto {t.hero_sub}", hero.subheadline),
            el(
                "div",
                "flex flex-col sm:flex-row gap-4 justify-center",
                accent_button(ctx, "px-8 py-3 rounded-xl font-bold text-sm", hero.primary_cta),
                el(
                    "button",
                    f"px-8 py-3 rounded-xl font-bold text-sm {t.secondary_btn}",
                    hero.secondary_cta,
                ),
            ),
        ),
        attrs={"id": "hero"},
    )


def build_team(team: Team | None, ctx: RenderContext) -> Element | None:
    if team is None or not team.members:
        return None
    t = ctx.theme
    cards = (
        el(
            "div",
            f"rounded-2xl p-6 {t.card_bg}",
            el(
                "img",
                "w-16 h-16 rounded-full object-cover mb-4",
                attrs={"src": member.avatar, "alt": member.name},
            ),
            el("p", "text-sm font-bold mb-1", member.name),
            el("p", f"text-xs mb-3 {t.section_label}", member.role),
            el("p", f"text-sm leading-relaxed {t.card_text}", member.bio),
        )
        for member in team.members
    )
    return el(
        "section",
        "py-24 px-4",
        el(
            "div",
            "max-w-6xl mx-auto",
            section_header(ctx, "TEAM", team.heading, "mb-12"),
            el("div", "grid grid-cols-1 md:grid-cols-3 gap-8", *cards),
        ),
        attrs={"id": "team"},
    )


def build_logo_bar(logo_bar: LogoBar | None, ctx: RenderContext) -> Element | None:
    if logo_bar is None or not logo_bar.logos:
        return None
    t = ctx.theme
    return el(
        "section",
        f"py-16 px-4 border-y {t.footer_bg}",
        el(
            "div",
            "max-w-6xl mx-auto flex flex-col md:flex-row items-center justify-between gap-6",
            el("p", f"text-xs font-bold uppercase tracking-[0.3em] {t.section_label}", logo_bar.heading),
            el(
                "div",
                "flex flex-wrap justify-center gap-6 md:gap-10",
                *(
                    el("span", f"text-sm md:text-base font-semibold {t.card_text}", name)
                    for name in logo_bar.logos
                ),
            ),
        ),
        attrs={"id": "logos"},
    )


def build_faq(faq: Faq | None, ctx: RenderContext) -> Element | None:
    if faq is None or not faq.items:
        return None
    t = ctx.theme
    items = (
        el(
            "div",
            f"rounded-2xl p-5 {t.testimonial_card}",
            el("p", f"text-sm font-semibold mb-2 {t.section_heading}", item.question),
            el("p", f"text-sm leading-relaxed {t.card_text}", item.answer),
        )
        for item in faq.items
    )
    return el(
        "section",
        "py-24 px-4",
        el(
            "div",
            "max-w-4xl mx-auto",
            section_header(ctx, "FAQ", faq.heading, "mb-12"),
            el("div", "space-y-4", *items),
        ),
        attrs={"id": "faq"},
    )


def build_features(features: Features | None, ctx: RenderContext) -> Element:
    features = require(features, "features")
    t = ctx.theme
    cards = (
        el(
            "div",
            f"rounded-2xl p-8 hover:-translate-y-2 transition-transform {t.card_bg}",
            el("span", "text-4xl mb-4 block", feature.icon),
            el("h3", "text-xl font-bold mb-3", feature.title),
            el("p", f"text-sm leading-relaxed {t.card_text}", feature.description),
        )
        for feature in features.features
    )
    return el(
        "section",
        "py-24 px-4",
        el(
            "div",
            "max-w-6xl mx-auto",
            section_header(ctx, features.section_label, features.heading),
            el("div", "grid grid-cols-1 md:grid-cols-3 gap-8", *cards),
        ),
        attrs={"id": "features"},
    )


def build_stats(stats: Stats | None, ctx: RenderContext) -> Element | None:
    if stats is None or not stats.items:
        return None
    t = ctx.theme
    items = (
        el(
            "div",
            "text-center",
            el("p", f"text-3xl md:text-4xl font-black mb-1 {t.section_heading}", stat.value),
            el("p", f"text-xs uppercase tracking-[0.25em] {t.section_label}", stat.label),
        )
        for stat in stats.items
    )
    return el(
        "section",
        "py-16 px-4",
        el(
            "div",
            "max-w-6xl mx-auto",
            section_header(ctx, "STATS", stats.heading, "mb-10"),
            el("div", "grid grid-cols-2 md:grid-cols-4 gap-6", *items),
        ),
        attrs={"id": "stats"},
    )


def build_newsletter(newsletter: Newsletter | None, ctx: RenderContext) -> Element | None:
    if newsletter is None or not newsletter.heading.strip():
        return None
    t = ctx.theme
    return el(
        "section",
        "py-24 px-4",
        el(
            "div",
            "max-w-3xl mx-auto text-center",
            el("p", f"{LABEL} {t.section_label}", "NEWSLETTER"),
            el("h2", f"{HEADING} mb-3 {t.section_heading}", newsletter.heading),
            el("p", f"text-sm md:text-base mb-6 {t.card_text}", newsletter.subtext),
            el(
                "div",
                "flex flex-col sm:flex-row gap-3 justify-center",
                el(
                    "input",
                    "w-full sm:w-80 px-4 py-3 rounded-xl bg-black/40 border text-sm "
                    f"outline-none focus:border-white/40 {t.footer_bg} {t.page_text}",
                    attrs={"type": "email", "placeholder": newsletter.placeholder},
                ),
                accent_button(ctx, "px-6 py-3 rounded-xl font-bold text-sm", newsletter.button_label),
            ),
        ),
        attrs={"id": "newsletter"},
    )


def _pricing_card(tier: PricingTier, ctx: RenderContext) -> Element:
    t = ctx.theme
    if tier.highlighted:
        card = f"rounded-2xl p-8 {t.pricing_highlight} scale-105 shadow-lg shadow-black/40"
    else:
        card = f"rounded-2xl p-8 {t.pricing_normal}"
    return el(
        "div",
        card,
        el("span", BADGE, "MOST POPULAR") if tier.highlighted else None,
        el("h3", f"text-2xl font-black mb-2 {t.section_heading}", tier.name),
        el(
            "div",
            "mb-6",
            el("span", f"text-4xl font-black {t.section_heading}", tier.price),
            el("span", f"text-sm {t.section_label}", f"/{tier.period}"),
        ),
        el(
            "ul",
            f"space-y-2 mb-6 text-sm {t.card_text}",
            *(
                el("li", "flex items-center gap-2", el("span", "text-emerald-400", "✓"), item)
                for item in tier.features
            ),
        ),
        el(
            "button",
            f"w-full py-3 rounded-xl font-bold text-sm {t.primary_btn}",
            tier.cta_label,
            style={
                "backgroundColor": ctx.accent if tier.highlighted else "transparent",
                "borderColor": ctx.accent,
                "borderWidth": 1,
            },
        ),
    )


def build_pricing(pricing: Pricing | None, ctx: RenderContext) -> Element:
    pricing = require(pricing, "pricing")
    return el(
        "section",
        "py-24 px-4",
        el(
            "div",
            "max-w-6xl mx-auto",
            section_header(ctx, pricing.section_label, pricing.heading),
            el(
                "div",
                "grid grid-cols-1 md:grid-cols-3 gap-8 items-stretch",
                *(_pricing_card(tier, ctx) for tier in pricing.tiers),
            ),
        ),
        attrs={"id": "pricing"},
    )


def build_testimonials(testimonials: Testimonials | None, ctx: RenderContext) -> Element:
    testimonials = require(testimonials, "testimonials")
    t = ctx.theme
    cards = (
        el(
            "div",
            f"rounded-2xl p-8 {t.testimonial_card}",
            el("div", f"text-lg mb-4 {t.star_color}", "★★★★★"),
            el("p", f"italic text-sm mb-6 leading-relaxed {t.card_text}", f'"{item.quote}"'),
            el(
                "div",
                "flex items-center gap-3",
                el(
                    "img",
                    "w-10 h-10 rounded-full object-cover",
                    attrs={"src": item.avatar, "alt": item.name},
                ),
                el(
                    "div",
                    "",
                    el("p", f"text-sm font-bold {t.section_heading}", item.name),
                    el("p", f"text-xs {t.section_label}", item.role),
                ),
            ),
        )
        for item in testimonials.testimonials
    )
    return el(
        "section",
        "py-24 px-4",
        el(
            "div",
            "max-w-6xl mx-auto",
            section_header(ctx, testimonials.section_label, testimonials.heading),
            el("div", "grid grid-cols-1 md:grid-cols-3 gap-8", *cards),
        ),
        attrs={"id": "testimonials"},
    )


def build_cta_banner(cta: CtaBanner | None, ctx: RenderContext) -> Element:
    cta = require(cta, "ctaBanner")
    t = ctx.theme
    return el(
        "section",
        "py-24 px-4",
        el(
            "div",
            f"max-w-4xl mx-auto text-center rounded-3xl px-8 py-16 {t.cta_bg}",
            el("h2", f"{HEADING} mb-4 {t.cta_text}", cta.headline),
            el("p", f"text-sm md:text-base mb-8 max-w-2xl mx-auto {t.card_text}", cta.subtext),
            accent_button(ctx, "px-8 py-3 rounded-xl font-bold text-sm", cta.cta_label),
        ),
        attrs={"id": "cta"},
    )


def build_footer(footer: Footer | None, ctx: RenderContext) -> Element:
    footer = require(footer, "footer")
    t = ctx.theme
    columns = (
        el(
            "div",
            "",
            el("p", f"text-xs font-bold uppercase tracking-[0.3em] mb-4 {t.section_label}", column.heading),
            el(
                "ul",
                f"space-y-2 text-sm {t.footer_text}",
                *(
                    el(
                        "li",
                        "",
                        el(
                            "a",
                            "hover:text-white transition-colors",
                            link.label,
                            attrs={"href": link.href or "#"},
                        ),
                    )
                    for link in column.links
                ),
            ),
        )
        for column in footer.columns
    )
    return el(
        "footer",
        f"py-16 px-4 mt-16 {t.footer_bg}",
        el(
            "div",
            "max-w-6xl mx-auto",
            el(
                "div",
                "grid grid-cols-2 md:grid-cols-4 gap-8 mb-12",
                el("div", "", el("span", "text-xl font-black mb-4 block", footer.logo)),
                *columns,
            ),
            el("div", "pt-6", el("p", f"text-xs {t.footer_text}", footer.copyright)),
        ),
    )


def build_optional_footer(footer: Footer | None, ctx: RenderContext) -> Element | None:
    if footer is None or not footer.columns:
        return None
    return build_footer(footer, ctx)
