"""TradingView embed configuration for the stock detail page.

The frontend injects each widget's script with its JSON config; rendering
happens entirely inside the TradingView scripts.
"""

TRADINGVIEW_SCRIPT_URL = 'https://s3.tradingview.com/external-embedding/embed-widget-'


def symbol_info_widget_config(symbol):
    return {
        'symbol': symbol.upper(),
        'colorTheme': 'dark',
        'isTransparent': True,
        'locale': 'en',
        'width': '100%',
        'height': 170,
    }


def _advanced_chart_config(symbol, style):
    return {
        'allow_symbol_change': False,
        'calendar': False,
        'details': True,
        'hide_side_toolbar': True,
        'hide_top_toolbar': False,
        'hide_legend': False,
        'hide_volume': False,
        'hotlist': False,
        'interval': 'D',
        'locale': 'en',
        'save_image': False,
        'style': style,
        'symbol': symbol.upper(),
        'theme': 'dark',
        'timezone': 'Etc/UTC',
        'backgroundColor': '#141414',
        'gridColor': '#141414',
        'watchlist': [],
        'withdateranges': False,
        'compareSymbols': [],
        'studies': [],
        'width': '100%',
        'height': 600,
    }


def candle_chart_widget_config(symbol):
    return _advanced_chart_config(symbol, style=1)


def baseline_widget_config(symbol):
    return _advanced_chart_config(symbol, style=10)


def technical_analysis_widget_config(symbol):
    return {
        'symbol': symbol.upper(),
        'colorTheme': 'dark',
        'isTransparent': True,
        'locale': 'en',
        'width': '100%',
        'height': 400,
        'interval': '1h',
        'largeChartUrl': '',
    }


def company_profile_widget_config(symbol):
    return {
        'symbol': symbol.upper(),
        'colorTheme': 'dark',
        'isTransparent': True,
        'locale': 'en',
        'width': '100%',
        'height': 440,
    }


def company_financials_widget_config(symbol):
    return {
        'symbol': symbol.upper(),
        'colorTheme': 'dark',
        'isTransparent': True,
        'locale': 'en',
        'width': '100%',
        'height': 464,
        'displayMode': 'regular',
        'largeChartUrl': '',
    }


# (name, script, config builder, height) in page order
STOCK_DETAIL_WIDGETS = [
    ('symbol_info', 'symbol-info.js', symbol_info_widget_config, 170),
    ('candle_chart', 'advanced-chart.js', candle_chart_widget_config, 600),
    ('baseline_chart', 'advanced-chart.js', baseline_widget_config, 600),
    ('technical_analysis', 'technical-analysis.js', technical_analysis_widget_config, 400),
    ('company_profile', 'symbol-profile.js', company_profile_widget_config, 440),
    ('company_financials', 'financials.js', company_financials_widget_config, 464),
]


def stock_detail_widgets(symbol):
    """Embeds for the stock detail page, in display order."""
    return [
        {
            'name': name,
            'script_url': f"{TRADINGVIEW_SCRIPT_URL}{script}",
            'config': builder(symbol),
            'height': height,
        }
        for name, script, builder, height in STOCK_DETAIL_WIDGETS
    ]
