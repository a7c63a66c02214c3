"""
Deterministic basic generator for ComponentCraft

Last stage of the fallback chain: keyword-driven synthesis of button, card,
pricing, hero, form and default components. It cannot fail for any prompt.
"""
import json
import logging
import re
from typing import Dict, List, Optional, TypedDict

logger = logging.getLogger(__name__)

PLACEHOLDER = re.compile(r"<<(\w+)>>")
COLOR_WORDS = re.compile(r"\b(red|orange|yellow|green|blue|purple|pink|black|white|gray|grey|teal|cyan|indigo|gradient)\b", re.IGNORECASE)

# checked in order; the first color named in the prompt wins
BUTTON_GRADIENTS = [
    ("orange", "from-orange-400 to-orange-600 hover:from-orange-500 hover:to-orange-700"),
    ("yellow", "from-yellow-400 to-yellow-600 hover:from-yellow-500 hover:to-yellow-700"),
    ("blue", "from-blue-400 to-blue-600 hover:from-blue-500 hover:to-blue-700"),
    ("green", "from-green-400 to-green-600 hover:from-green-500 hover:to-green-700"),
    ("red", "from-red-400 to-red-600 hover:from-red-500 hover:to-red-700"),
    ("gray", "from-gray-400 to-gray-600 hover:from-gray-500 hover:to-gray-700"),
    ("grey", "from-gray-400 to-gray-600 hover:from-gray-500 hover:to-gray-700"),
    ("teal", "from-teal-400 to-teal-600 hover:from-teal-500 hover:to-teal-700"),
    ("indigo", "from-indigo-400 to-indigo-600 hover:from-indigo-500 hover:to-indigo-700"),
    ("cyan", "from-cyan-400 to-cyan-600 hover:from-cyan-500 hover:to-cyan-700"),
]
DEFAULT_GRADIENT = "from-purple-500 to-pink-500 hover:from-purple-600 hover:to-pink-600"


class StyleSpecs(TypedDict, total=False):
    shape: str
    colors: List[str]
    size: str
    effects: List[str]


class PricingPlan(TypedDict, total=False):
    name: str
    price: str
    period: str
    features: List[str]
    popular: bool
    buttonText: str


ENTERPRISE_PLANS: List[PricingPlan] = [
    {"name": "Starter", "price": "$49", "period": "/month", "features": ["Up to 10 users", "5GB storage", "Basic support", "Core features"], "buttonText": "Start Free Trial"},
    {"name": "Professional", "price": "$149", "period": "/month", "features": ["Up to 100 users", "50GB storage", "Priority support", "Advanced analytics", "API access"], "popular": True, "buttonText": "Get Started"},
    {"name": "Enterprise", "price": "$499", "period": "/month", "features": ["Unlimited users", "Unlimited storage", "24/7 dedicated support", "Custom integrations", "White-label solution", "SLA guarantee"], "buttonText": "Contact Sales"},
]

COMPACT_PLANS: List[PricingPlan] = [
    {"name": "Basic", "price": "$5", "period": "/mo", "features": ["5 projects", "1GB storage", "Email support"], "buttonText": "Start"},
    {"name": "Pro", "price": "$15", "period": "/mo", "features": ["Unlimited projects", "10GB storage", "Priority support", "Analytics"], "popular": True, "buttonText": "Upgrade"},
]

CREATOR_PLANS: List[PricingPlan] = [
    {"name": "Hobby", "price": "$9", "period": "/month", "features": ["5 Projects", "10GB Storage", "Community Support", "Basic Templates"], "buttonText": "Get Started"},
    {"name": "Creator", "price": "$29", "period": "/month", "features": ["Unlimited Projects", "100GB Storage", "Priority Support", "Premium Templates", "Custom Domains"], "popular": True, "buttonText": "Start Creating"},
    {"name": "Team", "price": "$99", "period": "/month", "features": ["Everything in Creator", "Team Collaboration", "Advanced Analytics", "Custom Branding", "API Access", "24/7 Support"], "buttonText": "Try Team Plan"},
]

HERO_CONTENT: Dict[str, Dict[str, str]] = {
    "startup": {
        "title": "Build the Future with AI",
        "subtitle": "Revolutionary platform that transforms how teams collaborate and innovate",
        "ctaText": "Start Building",
        "secondaryCta": "Watch Demo",
        "bg": "bg-gradient-to-br from-blue-900 via-purple-900 to-black",
        "text": "text-white",
    },
    "minimal": {
        "title": "Simple. Powerful. Effective.",
        "subtitle": "The tool you need to get things done",
        "ctaText": "Get Started",
        "secondaryCta": "Learn More",
        "bg": "bg-white",
        "text": "text-gray-900",
    },
    "creative": {
        "title": "Unleash Your Creativity",
        "subtitle": "Design, create, and share your vision with the world",
        "ctaText": "Create Now",
        "secondaryCta": "Explore Gallery",
        "bg": "bg-gradient-to-br from-pink-400 via-purple-500 to-indigo-600",
        "text": "text-white",
    },
    "default": {
        "title": "Welcome to Something Amazing",
        "subtitle": "Discover the power of innovation and take your projects to the next level",
        "ctaText": "Get Started",
        "secondaryCta": "Learn More",
        "bg": "bg-gradient-to-br from-blue-600 to-purple-700",
        "text": "text-white",
    },
}


def _fill(template: str, **values) -> str:
    return PLACEHOLDER.sub(lambda match: str(values[match.group(1)]), template)


def _js_string(value: str) -> str:
    return json.dumps(value)


def _has_any(text: str, *needles: str) -> bool:
    return any(needle in text for needle in needles)


def extract_style_specs(prompt: str) -> StyleSpecs:
    """Shape, colors, size and effects named in a prompt."""
    lowered = prompt.lower()
    specs: StyleSpecs = {"effects": []}

    if "circular" in lowered or re.search(r"\bround\b", lowered):
        specs["shape"] = "circular"
    elif "square" in lowered:
        specs["shape"] = "square"
    elif "rounded" in lowered:
        specs["shape"] = "rounded"

    colors = [color.lower() for color in COLOR_WORDS.findall(prompt)]
    if colors:
        specs["colors"] = colors

    if _has_any(lowered, "large", "big"):
        specs["size"] = "large"
    elif _has_any(lowered, "small", "tiny"):
        specs["size"] = "small"

    if _has_any(lowered, "floating", "float"):
        specs["effects"].append("floating")
    if "glow" in lowered:
        specs["effects"].append("glow")
    if "shadow" in lowered:
        specs["effects"].append("shadow")

    return specs


def pricing_plans(description: str) -> List[PricingPlan]:
    """Tier structure chosen for a pricing description."""
    lowered = description.lower()
    if _has_any(lowered, "enterprise", "business"):
        return [dict(plan) for plan in ENTERPRISE_PLANS]
    if _has_any(lowered, "compact", "small"):
        return [dict(plan) for plan in COMPACT_PLANS]
    return [dict(plan) for plan in CREATOR_PLANS]


FLOATING_BUTTON = """const <<name>> = ({
  children = "✨",
  onClick,
  className = ""
}) => {
  const [isHovered, setIsHovered] = React.useState(false);

  return (
    <button
      onClick={onClick}
      onMouseEnter={() => setIsHovered(true)}
      onMouseLeave={() => setIsHovered(false)}
      className={`fixed bottom-8 right-8 w-16 h-16 bg-gradient-to-br <<gradient>> text-white font-bold <<shape>> shadow-2xl transition-all duration-300 transform ${isHovered ? 'scale-110 rotate-12' : 'scale-100 rotate-0'} ${className}`}
      style={{
        animation: 'float 3s ease-in-out infinite'
      }}
    >
      <span className="text-2xl">{children}</span>
      <style jsx>{`
        @keyframes float {
          0%, 100% { transform: translateY(0px); }
          50% { transform: translateY(-10px); }
        }
      `}</style>
    </button>
  );
};

export default <<name>>;"""

BUTTON = """// React component (no imports needed for preview)

const <<name>> = ({
  children = "Click Me",
  onClick,
  className = ""
}) => {
  return (
    <button
      onClick={onClick}
      className={`<<size>> bg-gradient-to-r <<gradient>> text-white font-medium <<shape>> <<effects>> ${className}`}
    >
      {children}
    </button>
  );
};

export default <<name>>;"""

CARD = """// React component (no imports needed for preview)

const <<name>> = ({
  title = "Card Title",
  children,
  className = ""
}) => {
  return (
    <div className={`bg-white rounded-xl border border-gray-200 shadow-lg p-6 ${className}`}>
      {title && (
        <h3 className="text-xl font-semibold text-gray-900 mb-4">
          {title}
        </h3>
      )}
      <div className="text-gray-600">
        {children || "Card content goes here"}
      </div>
    </div>
  );
};

export default <<name>>;"""

PRICING = """const <<name>> = ({ className = "", plans = <<plans>> }) => {
  const [selectedPlan, setSelectedPlan] = React.useState(null);

  const isDark = <<is_dark>>;
  const bgClassName = "<<bg>>";
  const cardClassName = "<<card>>";
  const titleText = <<title>>;

  return React.createElement('div', {
    className: 'py-12 px-4 ' + bgClassName + ' ' + (className || '')
  },
    React.createElement('div', { className: 'max-w-7xl mx-auto' },
      React.createElement('div', { className: 'text-center mb-12' },
        React.createElement('h2', {
          className: 'text-4xl font-bold mb-4 ' + (isDark ? 'text-white' : 'text-gray-900')
        }, titleText),
        React.createElement('p', {
          className: 'text-xl ' + (isDark ? 'text-gray-300' : 'text-gray-600')
        }, 'Select the perfect plan for your needs')
      ),

      React.createElement('div', { className: 'grid md:grid-cols-<<columns>> gap-8' },
        plans.map((plan, index) =>
          React.createElement('div', {
            key: index,
            className: 'relative ' + cardClassName + ' rounded-2xl shadow-xl transition-all duration-300 hover:shadow-2xl hover:scale-105' +
              (plan.popular ? ' ring-2 ring-blue-500 ring-opacity-50' : '') +
              (selectedPlan === plan.name ? ' ring-2 ring-green-500' : ''),
            onClick: () => setSelectedPlan(plan.name)
          },
            plan.popular && React.createElement('div', {
              className: 'absolute -top-4 left-1/2 transform -translate-x-1/2'
            },
              React.createElement('span', {
                className: 'bg-gradient-to-r from-blue-500 to-purple-600 text-white px-4 py-1 rounded-full text-sm font-semibold'
              }, 'Most Popular')
            ),

            React.createElement('div', { className: 'p-8' },
              React.createElement('h3', {
                className: 'text-2xl font-bold mb-2 ' + (isDark ? 'text-white' : 'text-gray-900')
              }, plan.name),

              React.createElement('div', { className: 'flex items-baseline mb-6' },
                React.createElement('span', {
                  className: 'text-5xl font-bold ' + (isDark ? 'text-white' : 'text-gray-900')
                }, plan.price),
                React.createElement('span', {
                  className: 'text-xl ml-1 ' + (isDark ? 'text-gray-400' : 'text-gray-500')
                }, plan.period)
              ),

              React.createElement('ul', { className: 'space-y-4 mb-8' },
                plan.features.map((feature, featureIndex) =>
                  React.createElement('li', { key: featureIndex, className: 'flex items-center' },
                    React.createElement('span', { className: 'text-green-500 mr-3' }, '✓'),
                    React.createElement('span', {
                      className: isDark ? 'text-gray-300' : 'text-gray-700'
                    }, feature)
                  )
                )
              ),

              React.createElement('button', {
                className: 'w-full py-3 px-6 rounded-lg font-semibold transition-all duration-300 ' +
                  (plan.popular
                    ? 'bg-gradient-to-r from-blue-500 to-purple-600 text-white hover:from-blue-600 hover:to-purple-700'
                    : 'bg-gray-100 text-gray-900 hover:bg-gray-200')
              }, plan.buttonText || 'Get Started')
            )
          )
        )
      ),

      React.createElement('div', { className: 'text-center mt-12' },
        React.createElement('p', {
          className: isDark ? 'text-gray-400' : 'text-gray-600'
        }, 'All plans include a 30-day money-back guarantee')
      )
    )
  );
};

export default <<name>>;"""

HERO = """const <<name>> = ({
  className = "",
  title = <<title>>,
  subtitle = <<subtitle>>,
  ctaText = <<cta>>,
  secondaryCta = <<secondary>>,
  onPrimaryClick,
  onSecondaryClick
}) => {
  const [isHovered, setIsHovered] = React.useState(false);

  const isDark = <<is_dark>>;
  const bgClassName = "<<bg>>";
  const textClassName = "<<text>>";

  return (
    <div className={`relative min-h-screen flex items-center justify-center ${bgClassName} ${className}`}>
      <div className="relative z-10 max-w-7xl mx-auto px-4 sm:px-6 lg:px-8 text-center">
        <div className="max-w-4xl mx-auto">
          <h1 className={`text-5xl md:text-7xl font-bold mb-8 leading-tight ${textClassName}`}>
            {title}
          </h1>

          <p className={`text-xl md:text-2xl mb-12 max-w-3xl mx-auto leading-relaxed ${
            isDark ? 'text-gray-300' : textClassName === 'text-white' ? 'text-white/90' : 'text-gray-600'
          }`}>
            {subtitle}
          </p>

          <div className="flex flex-col sm:flex-row gap-6 justify-center items-center">
            <button
              onClick={onPrimaryClick}
              onMouseEnter={() => setIsHovered(true)}
              onMouseLeave={() => setIsHovered(false)}
              className={`px-8 py-4 bg-white text-gray-900 font-semibold rounded-full text-lg transition-all duration-300 transform hover:scale-105 ${
                isHovered ? 'shadow-2xl scale-105' : 'shadow-xl'
              }`}
            >
              {ctaText}
            </button>

            <button
              onClick={onSecondaryClick}
              className={`px-8 py-4 border-2 ${
                textClassName === 'text-white' ? 'border-white text-white hover:bg-white hover:text-gray-900' : 'border-gray-900 text-gray-900 hover:bg-gray-900 hover:text-white'
              } font-semibold rounded-full text-lg transition-all duration-300 hover:scale-105`}
            >
              {secondaryCta}
            </button>
          </div>
        </div>
      </div>
    </div>
  );
};

export default <<name>>;"""

FORM = """// React component (no imports needed for preview)

const <<name>> = ({
  onSubmit,
  className = ""
}) => {
  const [values, setValues] = React.useState({ email: "", password: "" });

  const handleChange = (event) => {
    setValues({ ...values, [event.target.name]: event.target.value });
  };

  const handleSubmit = (event) => {
    event.preventDefault();
    onSubmit && onSubmit(values);
  };

  return (
    <form onSubmit={handleSubmit} className={`max-w-md mx-auto bg-white rounded-xl border border-gray-200 shadow-lg p-8 space-y-6 ${className}`}>
      <h2 className="text-2xl font-bold text-gray-900"><<title>></h2>
      <div>
        <label htmlFor="email" className="block text-sm font-medium text-gray-700 mb-2">Email</label>
        <input id="email" name="email" type="email" value={values.email} onChange={handleChange}
          className="w-full px-4 py-3 border border-gray-300 rounded-lg focus:outline-none focus:ring-2 focus:ring-blue-500" />
      </div>
      <div>
        <label htmlFor="password" className="block text-sm font-medium text-gray-700 mb-2">Password</label>
        <input id="password" name="password" type="password" value={values.password} onChange={handleChange}
          className="w-full px-4 py-3 border border-gray-300 rounded-lg focus:outline-none focus:ring-2 focus:ring-blue-500" />
      </div>
      <button type="submit" className="w-full py-3 px-6 bg-gradient-to-r from-blue-500 to-purple-600 text-white font-semibold rounded-lg hover:shadow-lg transition-all duration-300">
        Submit
      </button>
    </form>
  );
};

export default <<name>>;"""

DEFAULT = """// React component (no imports needed for preview)

const <<name>> = ({
  className = "",
  children
}) => {
  return (
    <div className={`p-4 bg-gray-50 border border-gray-200 rounded-md ${className}`}>
      {children || <<description>>}
    </div>
  );
};

export default <<name>>;"""


class BasicComponentGenerator:
    def generate(self, component_name: str, description: str) -> str:
        lowered = description.lower()
        specs = extract_style_specs(description)

        if "button" in lowered:
            kind, code = "button", self._button(component_name, specs)
        elif _has_any(lowered, "pricing", "price") or ("table" in lowered and "plan" in lowered):
            kind, code = "pricing", self._pricing(component_name, description)
        elif "card" in lowered:
            kind, code = "card", _fill(CARD, name=component_name)
        elif "form" in lowered or _has_any(lowered, "login", "sign in", "signup", "sign up"):
            kind, code = "form", self._form(component_name, lowered)
        elif _has_any(lowered, "hero", "banner", "landing"):
            kind, code = "hero", self._hero(component_name, lowered)
        else:
            kind, code = "default", _fill(DEFAULT, name=component_name, description=_js_string(description))

        logger.info(f"Basic generator produced a {kind} component '{component_name}'")
        return code

    def _button(self, name: str, specs: StyleSpecs) -> str:
        colors = specs.get("colors", [])
        gradient = next((classes for color, classes in BUTTON_GRADIENTS if color in colors), DEFAULT_GRADIENT)

        shape = {"circular": "rounded-full", "square": "rounded-none"}.get(specs.get("shape"), "rounded-lg")
        size = {"large": "px-10 py-5 text-lg", "small": "px-4 py-2 text-sm"}.get(specs.get("size"), "px-6 py-3 text-base")

        effects = specs.get("effects", [])
        effect_classes = "transition-all duration-300 transform hover:scale-105"
        if "floating" in effects:
            effect_classes += " animate-bounce"
        if "glow" in effects:
            effect_classes += " shadow-lg hover:shadow-2xl"

        if specs.get("shape") == "circular" and "floating" in effects:
            return _fill(FLOATING_BUTTON, name=name, gradient=gradient, shape=shape)
        return _fill(BUTTON, name=name, gradient=gradient, shape=shape, size=size, effects=effect_classes)

    def _pricing(self, name: str, description: str) -> str:
        lowered = description.lower()
        plans = pricing_plans(description)
        is_dark = _has_any(lowered, "dark", "alternative")
        is_modern = _has_any(lowered, "modern", "creative")

        if _has_any(lowered, "enterprise", "business"):
            title = "Enterprise Solutions"
        elif _has_any(lowered, "compact", "small"):
            title = "Simple Pricing"
        else:
            title = "Choose Your Creative Plan"

        if is_dark:
            bg, card = "bg-gradient-to-br from-gray-900 to-black", "bg-gray-800 text-white border-gray-700"
        elif is_modern:
            bg, card = "bg-gradient-to-br from-purple-50 via-blue-50 to-cyan-50", "bg-white/80 backdrop-blur-sm border-white/20"
        else:
            bg, card = "bg-gradient-to-br from-slate-50 to-blue-50", "bg-white"

        return _fill(
            PRICING,
            name=name,
            plans=json.dumps(plans),
            is_dark=json.dumps(is_dark),
            bg=bg,
            card=card,
            title=_js_string(title),
            columns=len(plans),
        )

    def _hero(self, name: str, lowered: str) -> str:
        if _has_any(lowered, "startup", "tech"):
            content = HERO_CONTENT["startup"]
        elif _has_any(lowered, "minimal", "simple"):
            content = HERO_CONTENT["minimal"]
        elif _has_any(lowered, "creative", "modern"):
            content = HERO_CONTENT["creative"]
        else:
            content = HERO_CONTENT["default"]

        is_dark = _has_any(lowered, "dark", "alternative")
        bg, text = content["bg"], content["text"]
        if is_dark:
            bg, text = "bg-gradient-to-br from-gray-900 to-black", "text-white"

        return _fill(
            HERO,
            name=name,
            title=_js_string(content["title"]),
            subtitle=_js_string(content["subtitle"]),
            cta=_js_string(content["ctaText"]),
            secondary=_js_string(content["secondaryCta"]),
            is_dark=json.dumps(is_dark),
            bg=bg,
            text=text,
        )

    def _form(self, name: str, lowered: str) -> str:
        title: Optional[str] = None
        if _has_any(lowered, "signup", "sign up", "register"):
            title = "Create an account"
        elif _has_any(lowered, "login", "sign in"):
            title = "Sign in"
        return _fill(FORM, name=name, title=title or "Get in touch")
