"""Built-in demo texts carrying typical typographic artifacts."""

from __future__ import annotations

AI_GENERATED_SAMPLE = (
    "Welcome to our revolutionary platform! We're thrilled to announce that our "
    "cutting-edge AI technology has been meticulously designed to transform the way "
    "you approach content creation.\n"
    "\n"
    "Our innovative solution leverages state-of-the-art algorithms to deliver "
    "unparalleled results that will exceed your expectations. With our comprehensive "
    "suite of tools, you'll be able to streamline your workflow and achieve "
    "remarkable outcomes.\n"
    "\n"
    "\u201cThis is absolutely game-changing,\u201d said one of our satisfied customers. "
    "\u201cI've never seen anything quite like this before.\u201d\n"
    "\n"
    "The platform offers:\n"
    "\u2022 Advanced machine learning capabilities\n"
    "\u2022 Seamless integration with existing systems  \n"
    "\u2022 Real-time analytics and insights\u2026\n"
    "\u2022 24/7 customer support\n"
    "\n"
    "Don't miss out on this incredible opportunity to revolutionize your business "
    "processes. Join thousands of satisfied customers who have already experienced "
    "the transformative power of our solution."
)

WITH_MARKERS_SAMPLE = (
    '"Smart quotes and em-dashes \u2014 these are common AI markers that make text look '
    'artificial," explained the researcher. \n'
    "\n"
    "The study found that AI-generated content often contains:\n"
    "\u2022 Fancy quotation marks \u201clike these\u201d\n"
    "\u2022 Em-dashes \u2014 instead of regular hyphens\n"
    "\u2022 Ellipsis symbols\u2026 rather than three dots\n"
    "\u2022 Non-breaking spaces and hidden Unicode characters\n"
    "\u2022 Trailing whitespace at line ends   \n"
    "\n"
    '"These subtle markers can be detected by both humans and algorithms," the expert '
    'noted. "Removing them makes text appear more natural and human-written."'
)

SAMPLE_TEXTS: dict[str, str] = {
    "ai-generated": AI_GENERATED_SAMPLE,
    "with-markers": WITH_MARKERS_SAMPLE,
}


def get_sample(name: str) -> str:
    """Return the demo text registered under `name`."""

    try:
        return SAMPLE_TEXTS[name]
    except KeyError:
        known = ", ".join(sorted(SAMPLE_TEXTS))
        raise KeyError(f"Unknown sample `{name}`; available: {known}.") from None
