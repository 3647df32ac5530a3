"""Fixed prompt text blocks: persona, page section lists, preset styles."""

from shopforge.schema import PageType, StylePreset

PERSONA = "You are ShopForge, a world-class product designer and UX architect."

PAGE_SECTIONS: dict[PageType, str] = {
    PageType.LANDING: """LANDING PAGE sections (in this exact order):
1. NAV: fixed, backdrop-blur-md, logo left + nav links right, z-50
2. HERO: min-h-screen, huge headline text-7xl lg:text-8xl font-black, gradient text, subheadline, 2 CTA buttons (primary solid + secondary outline), full background image with dark overlay OR bold gradient
3. FEATURES: section label + heading, 3-4 cards in grid (md:grid-cols-3), each card has emoji icon, bold title, description, hover:-translate-y-2 effect
4. PRICING: section label + heading, 3 tier cards, MIDDLE card has gradient bg + scale-105 + "Most Popular" badge, each tier has checkmark feature list + CTA button
5. TESTIMONIALS: section label + heading, 3 cards with photo avatar img, stars in amber-400, italic quote, customer name + role
6. CTA BANNER: full-width gradient background section, bold headline, large button
7. FOOTER: logo, 3 columns of links, copyright""",
    PageType.PRODUCT: """PRODUCT PAGE sections (in this exact order):
1. NAV: fixed, backdrop-blur-md, logo + links + cart icon with badge, z-50
2. PRODUCT SECTION: two-column (lg:grid-cols-2). LEFT: large product image + 3 thumbnails; RIGHT: breadcrumb, title, star rating + count, price with crossed-out original, description, color swatches, size selector, quantity selector, Add to Cart button, trust badges
3. DETAILS TABS: 3 tab buttons (Description/Specs/Reviews), show Description content
4. REVIEWS: overall rating, 3 review cards with avatar, verified badge, stars, review text
5. FOOTER: logo, links, copyright""",
}

PRESET_STYLES: dict[StylePreset, str] = {
    StylePreset.MINIMALIST: """STYLE PRESET: MINIMALIST
- White or off-white backgrounds (bg-white, bg-gray-50)
- Single subtle accent color used sparingly (gray-900 for text, one soft accent like slate-600 or stone-500)
- Massive amounts of whitespace: sections need py-32 or py-40
- Typography-forward: huge clean headlines, light body text
- NO gradients anywhere, flat colors only
- Thin borders (border-gray-100), subtle shadows (shadow-sm)
- Buttons: outline style with thin border, minimal padding
- Cards: white background, very subtle border, almost no shadow
- Think: Apple.com, Notion, Linear.app""",
    StylePreset.BOLD: """STYLE PRESET: BOLD
- High contrast: black or zinc-950 base with ONE vivid brand accent color
- Huge typography: hero text at text-8xl lg:text-9xl font-black
- Thick solid buttons with strong hover effects
- Strong geometric layouts, grid-based
- Use the brand's accent color aggressively on key elements
- High contrast borders and dividers
- Cards: dark background with colored accent border on top
- Think: Figma, Framer, Vercel marketing pages""",
    StylePreset.LUXURY: """STYLE PRESET: LUXURY
- Dark backgrounds only: bg-black or bg-zinc-950
- Gold/champagne accent colors: amber-300, yellow-200, or warm white
- Generous spacing: everything feels exclusive and unhurried
- Thin elegant borders: border-amber-300/20 or border-white/10
- Subtle gradient overlays on hero: from-black via-zinc-900 to-black
- Serif-inspired feel: use tracking-wide on headings
- Buttons: gold outlined or thin white bordered
- Cards: near-black with thin gold borders, subtle glow
- Think: Rolls-Royce, Cartier, high-end fashion brands""",
    StylePreset.PLAYFUL: """STYLE PRESET: PLAYFUL
- Bright, saturated backgrounds: use the brand color boldly
- Rounded corners everywhere: rounded-3xl on cards, rounded-full on buttons
- Multiple colors used together harmoniously
- Fun gradient backgrounds in hero section
- Large emoji usage as section icons
- Bouncy hover effects: hover:scale-110 hover:-rotate-1
- Buttons: large, rounded-full, colorful with shadow
- Cards: colorful backgrounds, rounded-3xl, playful shadows
- Think: Duolingo, Notion's colorful pages, Framer templates""",
}

DESIGN_RULES = """DESIGN RULES:
- CRITICAL: Base the ENTIRE color scheme on what the user describes AND the style preset above.
- Accent color: pick ONE strong accent color from the user description, use it consistently.
- Gradient headline: bg-gradient-to-r using brand accent colors, bg-clip-text text-transparent.
- Section spacing: py-24 or py-32, max-w-6xl mx-auto px-4 so the layout breathes like a premium SaaS.
- Every section has a small uppercase label (tracking-widest text-xs mb-3) before the main heading.
Images: Use https://loremflickr.com/WIDTH/HEIGHT/keyword1,keyword2 where keywords EXACTLY describe the product/brand content.
Examples:
- Headphones: https://loremflickr.com/1200/1200/headphones,audio
- Coffee: https://loremflickr.com/1200/800/coffee,espresso
- Skincare: https://loremflickr.com/800/800/skincare,beauty
- Sneakers: https://loremflickr.com/1200/1200/sneakers,shoes
- Person avatars: https://loremflickr.com/96/96/portrait,face
- Team avatars: https://loremflickr.com/128/128/portrait,professional
- Hero background: https://loremflickr.com/1600/900/BRANDKEYWORD,lifestyle
ALWAYS use specific product keywords, never generic "product" or "image". For avatars ALWAYS use portrait,face, never product keywords."""

RESPONSIVE_RULES = """- LAYOUT MUST BE FULLY RESPONSIVE:
  - Use sm: md: lg: prefixes throughout.
  - No horizontal scrolling on mobile; content must fit within the viewport.
  - Grids collapse gracefully (e.g. grid-cols-1 on mobile, md:grid-cols-2/3 on larger screens).
  - Typography scales appropriately for each breakpoint.
- The final page should look like a top-tier SaaS marketing site (Stripe, Linear, Vercel quality) on desktop, tablet, and mobile."""

COLOR_CHANGE_RULE = """COLOR CHANGE RULE:
If user asks to change color, replace ALL color Tailwind classes (bg-, text-, border-, from-, to-) with new color. Keep layout identical."""

OUTPUT_FORMAT = """OUTPUT FORMAT (CRITICAL):
- Return ONLY a raw JSON object
- No markdown, no code fences, no text before or after
- Must start with { and end with }
- JSON must be valid and parseable with JSON.parse()"""

LANDING_SHAPE = """Shape for a LANDING page (pageType = "landing"):
{
  "pageType": "landing",
  "title": "Human-readable page title",
  "landing": {
    "nav": {
      "logo": "Brand text logo",
      "links": [
        { "label": "Features", "href": "#features" },
        { "label": "Pricing", "href": "#pricing" },
        { "label": "Testimonials", "href": "#testimonials" }
      ],
      "ctaLabel": "Call to action button label",
      "accentColor": "Tailwind color name or hex, e.g. '#f97316'"
    },
    "hero": {
      "headline": "Huge marketing headline that matches the brand",
      "subheadline": "Supporting copy explaining the product or service",
      "primaryCta": "Primary call to action",
      "secondaryCta": "Secondary call to action",
      "backgroundImage": "https://loremflickr.com/1600/900/BRANDKEYWORD,lifestyle"
    },
    "features": {
      "sectionLabel": "FEATURES",
      "heading": "Benefit-driven section heading",
      "features": [
        { "icon": "emoji like ☕ or ✨", "title": "Short feature title", "description": "2-3 sentence explanation of the benefit" }
      ]
    },
    "pricing": {
      "sectionLabel": "PRICING",
      "heading": "Pricing section heading",
      "tiers": [
        { "name": "Plan name", "price": "$29", "period": "month", "features": ["Bullet point feature"], "ctaLabel": "Button label", "highlighted": true }
      ]
    },
    "testimonials": {
      "sectionLabel": "TESTIMONIALS",
      "heading": "Social proof heading",
      "testimonials": [
        { "quote": "Short believable customer quote (no lorem ipsum)", "name": "Customer name", "role": "Customer role or company", "avatar": "https://loremflickr.com/96/96/portrait,face" }
      ]
    },
    "faq": {
      "sectionLabel": "FAQ",
      "heading": "Frequently Asked Questions",
      "items": [ { "question": "Customer question", "answer": "Clear, helpful answer in 2-3 sentences." } ]
    },
    "stats": {
      "heading": "Stats section heading",
      "items": [ { "label": "Customers", "value": "10k+" } ]
    },
    "newsletter": {
      "heading": "Newsletter heading",
      "subtext": "Short line explaining why to subscribe.",
      "placeholder": "Email input placeholder text",
      "buttonLabel": "Subscribe button label"
    },
    "team": {
      "heading": "Team section heading",
      "members": [
        { "name": "Team member name", "role": "Role or title", "bio": "Short 1-2 sentence bio.", "avatar": "https://loremflickr.com/128/128/portrait,professional" }
      ]
    },
    "logoBar": { "heading": "Logo bar heading", "logos": ["Company One", "Company Two"] },
    "ctaBanner": {
      "headline": "Final CTA banner headline",
      "subtext": "One-sentence reminder of the core value prop",
      "ctaLabel": "Button label"
    },
    "footer": {
      "logo": "Brand text logo for footer",
      "columns": [ { "heading": "Column heading", "links": [ { "label": "Link label", "href": "#" } ] } ],
      "copyright": "© YEAR Brand name. All rights reserved."
    }
  }
}"""

PRODUCT_SHAPE = """Shape for a PRODUCT page (pageType = "product") is identical except the "product" branch is populated instead of "landing":
{
  "pageType": "product",
  "title": "Human-readable product page title",
  "product": {
    "nav": {
      "logo": "Brand text logo",
      "links": [
        { "label": "Details", "href": "#details" },
        { "label": "Reviews", "href": "#reviews" }
      ],
      "ctaLabel": "Call to action button label",
      "accentColor": "Tailwind color name or hex, e.g. '#22c55e'"
    },
    "productSection": {
      "title": "Product name",
      "description": "Marketing description of the product in complete sentences",
      "price": "$199",
      "originalPrice": "$249",
      "images": [
        "https://loremflickr.com/1200/1200/PRODUCT_CATEGORY",
        "https://loremflickr.com/800/800/PRODUCT_CATEGORY"
      ],
      "colors": ["#000000", "#ffffff"],
      "sizes": ["S", "M", "L"],
      "ctaLabel": "Main buy/add-to-cart button label (e.g. 'Buy Now' or 'Add to cart')"
    },
    "reviews": {
      "heading": "Reviews section heading",
      "summaryText": "Short summary of customer sentiment (e.g. 'Loved by hundreds of creators')",
      "averageRating": 4.8,
      "reviewCount": 128,
      "reviews": [
        { "name": "Customer name", "avatar": "https://loremflickr.com/96/96/portrait,face", "rating": 5, "title": "Short review title", "text": "Full review text in 2-3 sentences, no lorem ipsum." }
      ]
    },
    "relatedProducts": {
      "heading": "Related products heading",
      "items": [ { "title": "Product name", "image": "https://loremflickr.com/600/600/PRODUCT_CATEGORY", "price": "$49" } ]
    },
    "footer": {
      "logo": "Brand text logo for footer",
      "columns": [ { "heading": "Column heading", "links": [ { "label": "Link label", "href": "#" } ] } ],
      "copyright": "© YEAR Brand name. All rights reserved."
    }
  }
}"""
