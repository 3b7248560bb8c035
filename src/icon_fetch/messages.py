"""User-visible strings in the supported languages."""

import logging

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "app_title": "IconFetch",
        "app_subtitle": "Enter a domain to get its favicon address and an AI brand analysis.",
        "input_label": "Website",
        "input_hint": "e.g. github.com",
        "fetch_button": "Fetch",
        "invalid_domain": "Please enter a valid website address (e.g. github.com)",
        "request_failed": "Something went wrong while processing the request. "
        "Check your connection or try again later.",
        "icon_url_label": "Icon URL",
        "copy_tooltip": "Copy to clipboard",
        "copied": "Copied",
        "open_icon": "Open in new window",
        "analysis_title": "AI brand analysis",
        "analysis_pending": "Analyzing the brand's visual language...",
        "palette_label": "Brand palette",
        "style_label": "Visual style",
        "identity_label": "Brand identity",
        "improvements_label": "Icon improvement suggestion",
        "history_title": "Recent lookups",
        "history_empty": "No history yet",
        "history_clear": "Clear history",
        "empty_state": "Enter a domain to start",
    },
    "zh": {
        "app_title": "IconFetch",
        "app_subtitle": "输入域名，获取官方图标资源地址并享受 AI 品牌深度分析。",
        "input_label": "网址",
        "input_hint": "输入网址，例如: github.com",
        "fetch_button": "获取",
        "invalid_domain": "请输入有效的网址 (例如: github.com)",
        "request_failed": "处理请求时出错，请检查网络或稍后重试。",
        "icon_url_label": "图标完整地址 (URL)",
        "copy_tooltip": "点击复制",
        "copied": "已复制",
        "open_icon": "在新窗口打开",
        "analysis_title": "AI 品牌视觉分析",
        "analysis_pending": "正在分析品牌视觉语言...",
        "palette_label": "品牌调色盘",
        "style_label": "视觉风格",
        "identity_label": "品牌意涵",
        "improvements_label": "AI 图标优化方案",
        "history_title": "最近查询",
        "history_empty": "暂无历史记录",
        "history_clear": "清空历史",
        "empty_state": "输入域名即可开始提取图标",
    },
}


def get_message(key: str, language: str = DEFAULT_LANGUAGE) -> str:
    """
    Look up a localized message.

    Unknown languages fall back to English.

    Args:
        key: Message key
        language: Language code ('en' or 'zh')

    Returns:
        Localized message text

    Raises:
        KeyError: If the key does not exist
    """
    catalog = MESSAGES.get(language)
    if catalog is None:
        logger.debug(f"Unknown language {language!r}, using {DEFAULT_LANGUAGE}")
        catalog = MESSAGES[DEFAULT_LANGUAGE]
    return catalog[key]
