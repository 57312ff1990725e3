"""Report section tables for both tones.

Both tones cover the same topics in the same order; only the vocabulary
differs.  Templates interpolate the keys built by
:func:`roaster.grader.report.build_context`.
"""

from __future__ import annotations

from roaster.grader.rules import (
    NUMBERED,
    PARAGRAPH,
    Rule,
    Section,
    always,
    line,
)
from roaster.scraper.models import NO_H1, NO_TITLE

FIRST_IMPRESSIONS = Section(
    key="first_impressions",
    roast_heading="First Impressions",
    professional_heading="Executive Summary",
    layout=PARAGRAPH,
    lines=(
        line(
            Rule(
                lambda c: c.signals.title == NO_TITLE,
                "No <title> at all. Your browser tab just shows the URL, like a site in witness protection.",
                "The page has no title element, so browser tabs and search results fall back to the raw URL.",
            ),
            Rule(
                lambda c: c.score < 70,
                "\"{title}\" - Oh honey, did you let your cat walk across the keyboard when naming this? "
                "I've seen better titles on spam emails.",
                "The website \"{title}\" has a functional foundation that requires strategic "
                "improvements to compete effectively.",
            ),
            Rule(
                always,
                "\"{title}\" - Okay, at least the title doesn't make me want to close the tab "
                "immediately. Low bar, but you cleared it.",
                "The website \"{title}\" demonstrates solid fundamentals with room for optimization.",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.h1_text == NO_H1,
                "And there's no headline, so visitors get to guess what this place is about.",
                "No primary headline (H1) was found to anchor the page's message.",
            ),
            Rule(
                always,
                "The headline yells \"{h1_text}\" at everyone who walks in.",
                "Primary headline: \"{h1_text}\".",
            ),
        ),
    ),
)

DESIGN = Section(
    key="design",
    roast_heading="Design Crimes 👮",
    professional_heading="Design Assessment",
    lines=(
        line(
            Rule(
                lambda c: c.signals.image_count == 0,
                "Zero images. Bold minimalism, or did the uploads just never happen?",
                "Images: none detected. Supporting visuals would reinforce the message.",
            ),
            Rule(
                lambda c: c.signals.images_without_alt > 0,
                "{image_count} images found and {images_without_alt} are playing hide and seek "
                "with alt text. Screen readers hate this one weird trick!",
                "Images: {image_count} found, {images_without_alt} without alt text ⚠️",
            ),
            Rule(
                always,
                "{image_count} images found, all with alt text. Someone actually cares about accessibility!",
                "Images: {image_count} found, all with alt text ✅",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.h1_count == 0,
                "NO H1 TAG?! Google is crying somewhere. How will anyone know what this page is about?",
                "Heading Structure: 0 H1 tags ⚠️ Missing",
            ),
            Rule(
                lambda c: c.signals.h1_count > 1,
                "{h1_count} H1 tags. Multiple H1s? Pick a lane!",
                "Heading Structure: {h1_count} H1 tags ⚠️ Multiple - should be single",
            ),
            Rule(
                always,
                "1 H1 tag. At least you got that right.",
                "Heading Structure: 1 H1 tag ✅",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.css_count == 0,
                "No stylesheets at all. Is this a website or a 1996 time capsule?",
                "Styling: no stylesheets detected ⚠️",
            ),
            Rule(
                lambda c: c.signals.css_count > 10,
                "{css_count} stylesheets. Somebody really couldn't decide on a look.",
                "Styling: {css_count} stylesheets - consider consolidating to reduce requests",
            ),
            Rule(
                always,
                "{css_count} stylesheet(s). Reasonable. I'm as surprised as you are.",
                "Styling: {css_count} stylesheet(s) ✅",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.has_favicon,
                "Favicon: ✅ Your browser tab has a face.",
                "Favicon: ✅ Present",
            ),
            Rule(
                always,
                "No favicon. Your browser tab is a blank gray square of sadness.",
                "Favicon: ⚠️ Missing - Affects brand recognition",
            ),
        ),
    ),
)

TECHNICAL = Section(
    key="technical",
    roast_heading="Technical Sins 💀",
    professional_heading="Technical Assessment",
    lines=(
        line(
            Rule(
                lambda c: c.signals.has_https,
                "HTTPS: ✅ Congrats on doing the bare minimum.",
                "SSL Certificate: ✅ Active (HTTPS enabled)",
            ),
            Rule(
                always,
                "🚨 NO HTTPS?! It's not 2005 anymore! Chrome is literally screaming "
                "'NOT SECURE' at your visitors.",
                "SSL Certificate: ⚠️ Missing - Critical security issue",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.has_viewport,
                "Mobile viewport: ✅ Your site won't look like a postage stamp on phones.",
                "Mobile Optimization: ✅ Viewport configured",
            ),
            Rule(
                always,
                "No viewport meta tag = your mobile users are pinching and zooming like it's 2008.",
                "Mobile Optimization: ⚠️ Viewport meta tag missing",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.has_meta_description,
                "Meta description exists. Shocking. Someone did their homework.",
                "Meta Description: ✅ Present",
            ),
            Rule(
                always,
                "No meta description. Google literally has no idea what you do. You're a mystery "
                "wrapped in an enigma wrapped in bad SEO.",
                "Meta Description: ⚠️ Missing - Impacts search visibility",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.script_count > 20,
                "{script_count} script tags. Your visitors' laptops are taking off like jet engines.",
                "Scripts: {script_count} script tags ⚠️ Heavy - audit and defer non-critical JavaScript",
            ),
            Rule(
                always,
                "{script_count} script tag(s). Restraint! Who knew?",
                "Scripts: {script_count} script tag(s) ✅",
            ),
        ),
    ),
)

CONTENT = Section(
    key="content",
    roast_heading="Content Critique ✍️",
    professional_heading="Content Evaluation",
    lines=(
        line(
            Rule(
                lambda c: c.values["word_count"] == 0,
                "There's basically no readable text here. Bold strategy: let visitors imagine the copy.",
                "Copy: almost no readable text was found; visitors and search engines need content "
                "to understand the offer.",
            ),
            Rule(
                lambda c: c.values["word_count"] < 100,
                "About {word_count} words of copy. Tweet-length websites are not the flex you think they are.",
                "Copy: roughly {word_count} words on the page; consider expanding the value proposition.",
            ),
            Rule(
                always,
                "Around {word_count} words of actual copy up top. Whether anyone reads them is another matter.",
                "Copy: roughly {word_count} words of readable content above the fold.",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.button_count == 0 and c.signals.form_count == 0,
                "No buttons, no forms. Visitors can look but they can't touch.",
                "Calls-to-Action: no buttons or forms found ⚠️",
            ),
            Rule(
                always,
                "{button_count} button(s) and {form_count} form(s). At least people can click something.",
                "Calls-to-Action: {button_count} button(s), {form_count} form element(s)",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.social_count == 0,
                "Zero social links. Either you're mysterious or you forgot the internet is social.",
                "Social Presence: 0/4 social platforms linked",
            ),
            Rule(
                always,
                "{social_count}/4 social platforms linked. Influencer status: pending.",
                "Social Presence: {social_count}/4 social platforms linked",
            ),
        ),
        line(
            Rule(
                lambda c: c.signals.link_count == 0,
                "Not a single link. It's a dead end with a domain name.",
                "Navigation: no links found; visitors have nowhere to go next ⚠️",
            ),
            Rule(
                always,
                "{link_count} links to get lost in.",
                "Navigation: {link_count} links",
            ),
        ),
    ),
)

VERDICT = Section(
    key="verdict",
    roast_heading="The Verdict 🎤",
    professional_heading="Summary",
    layout=PARAGRAPH,
    lines=(
        line(
            Rule(
                lambda c: c.score < 60,
                "This website is like a participation trophy - it exists, and that's about all "
                "we can say for it.",
                "Overall the site scores {score}/100 ({grade}). Foundational issues in security, "
                "SEO or mobile readiness should be addressed before investing in design or content.",
            ),
            Rule(
                lambda c: c.score < 80,
                "Not terrible, not great. You're the C student of websites - present but not memorable.",
                "Overall the site scores {score}/100 ({grade}). The basics are largely in place; "
                "targeted fixes will move it into the top tier.",
            ),
            Rule(
                always,
                "Okay fine, this is actually decent. I'm almost impressed. Almost.",
                "Overall the site scores {score}/100 ({grade}). It follows most best practices; "
                "remaining gains come from performance and content refinement.",
            ),
        ),
    ),
)

RECOMMENDATIONS = Section(
    key="recommendations",
    roast_heading="Redemption Path 🛤️",
    professional_heading="Priority Recommendations",
    layout=NUMBERED,
    lines=(
        line(
            Rule(
                lambda c: not c.signals.has_https,
                "GET HTTPS IMMEDIATELY - it's free with Let's Encrypt, no excuses",
                "**Implement SSL Certificate** - Critical for security, SEO, and user trust. "
                "Use Let's Encrypt for free SSL.",
            ),
            Rule(
                lambda c: c.signals.images_without_alt > 0,
                "Add alt text to your images (accessibility AND SEO, two birds one stone)",
                "**Add Alt Text to Images** - Improves accessibility and SEO. Describe each "
                "image's content and purpose.",
            ),
            Rule(
                always,
                "Check your page speed - nobody waits for slow sites",
                "**Optimize Page Performance** - Compress images and minimize render-blocking resources.",
            ),
        ),
        line(
            Rule(
                lambda c: not c.signals.has_meta_description,
                "Write a meta description that doesn't make people fall asleep",
                "**Add Meta Description** - Write a compelling 150-160 character description "
                "for search results.",
            ),
            Rule(
                lambda c: c.signals.h1_count != 1,
                "Use exactly one H1. Not zero. Not five. One.",
                "**Fix Heading Structure** - Use a single, descriptive H1 per page.",
            ),
            Rule(
                always,
                "Review your content hierarchy and internal linking",
                "**Enhance Content Strategy** - Review content hierarchy and ensure a clear value "
                "proposition above the fold.",
            ),
        ),
        line(
            Rule(
                lambda c: not c.signals.has_viewport,
                "Add a viewport meta tag before your mobile users riot",
                "**Add Viewport Meta Tag** - Essential for mobile responsiveness. Add: "
                "<meta name=\"viewport\" content=\"width=device-width, initial-scale=1\">",
            ),
            Rule(
                lambda c: c.signals.button_count == 0,
                "Add a call-to-action button. People can't buy what they can't click.",
                "**Add Clear Calls-to-Action** - Give visitors an obvious next step with a "
                "prominent button.",
            ),
            Rule(
                always,
                "Make those CTAs pop - if I can't find your button in 2 seconds, neither can your customers",
                "**Improve User Engagement** - Add clearer calls-to-action and reduce friction "
                "in user journeys.",
            ),
        ),
    ),
)

REPORT_SECTIONS: tuple[Section, ...] = (
    FIRST_IMPRESSIONS,
    DESIGN,
    TECHNICAL,
    CONTENT,
    VERDICT,
    RECOMMENDATIONS,
)
