"""
Component Template Library for ComponentCraft

Fixed catalogue of keyword-tagged component templates used as generation
starting points. Iteration order is the declaration order below and is part
of the matching contract (ties go to the first template).
"""

from typing import Dict, List, TypedDict


class ComponentTemplateData(TypedDict):
    """Type definition for a catalogue entry."""
    id: str
    name: str
    keywords: List[str]
    code: str


COMPONENT_TEMPLATES: List[ComponentTemplateData] = [
    {
        "id": "button-animated",
        "name": "Animated Button",
        "keywords": ["button", "animated", "hover", "gradient"],
        "code": """const AnimatedButton = ({ children, onClick, variant = 'primary', size = 'md' }) => {
  const sizeClasses = {
    sm: 'px-4 py-2 text-sm',
    md: 'px-6 py-3 text-base',
    lg: 'px-8 py-4 text-lg'
  };

  const variantStyles = {
    primary: 'linear-gradient(135deg, #667eea 0%, #764ba2 100%)',
    secondary: 'linear-gradient(135deg, #f093fb 0%, #f5576c 100%)',
    danger: 'linear-gradient(135deg, #ff6b6b 0%, #ee5a24 100%)',
    success: 'linear-gradient(135deg, #00b894 0%, #00a085 100%)'
  };

  return (
    <button
      onClick={onClick}
      className={`${sizeClasses[size]} rounded-lg font-medium transition-all duration-300 transform hover:scale-105 hover:shadow-lg text-white`}
      style={{ background: variantStyles[variant] }}
    >
      {children}
    </button>
  );
};""",
    },
    {
        "id": "button-glow",
        "name": "Glow Button",
        "keywords": ["button", "glow", "shadow", "float", "neon"],
        "code": """const GlowButton = ({ children, onClick, color = 'purple' }) => {
  const colorClasses = {
    purple: 'from-purple-500 to-pink-500 hover:shadow-purple-500/50',
    blue: 'from-blue-500 to-cyan-500 hover:shadow-blue-500/50',
    green: 'from-green-500 to-emerald-500 hover:shadow-green-500/50'
  };

  return (
    <button
      onClick={onClick}
      className={`px-8 py-4 bg-gradient-to-r ${colorClasses[color]} text-white font-bold rounded-full transition-all duration-300 hover:shadow-2xl transform hover:-translate-y-1`}
    >
      {children}
    </button>
  );
};""",
    },
    {
        "id": "card-glass",
        "name": "Glass Card",
        "keywords": ["card", "glass", "glassmorphism", "blur", "transparent"],
        "code": """const GlassCard = ({ title, children, className = '' }) => {
  return (
    <div className={`relative backdrop-blur-lg bg-white/10 border border-white/20 rounded-2xl p-6 shadow-2xl ${className}`}>
      <div className="absolute inset-0 bg-gradient-to-br from-white/10 to-transparent rounded-2xl"></div>
      <div className="relative z-10">
        {title && (
          <h3 className="text-2xl font-bold text-white mb-4">{title}</h3>
        )}
        <div className="text-white/80">
          {children}
        </div>
      </div>
    </div>
  );
};""",
    },
    {
        "id": "hero-gradient",
        "name": "Hero Section",
        "keywords": ["hero", "section", "landing", "header", "cta", "gradient"],
        "code": """const HeroSection = ({ title, subtitle, ctaText, onCtaClick }) => {
  return (
    <section className="relative min-h-screen flex items-center justify-center overflow-hidden">
      <div className="absolute inset-0 bg-gradient-to-br from-purple-600 via-pink-500 to-orange-400"></div>
      <div className="absolute inset-0 bg-black/20"></div>

      <div className="relative z-10 text-center px-6 max-w-4xl mx-auto">
        <h1 className="text-5xl md:text-7xl font-bold text-white mb-6 animate-fade-in">
          {title || "Welcome to the Future"}
        </h1>
        <p className="text-xl md:text-2xl text-white/90 mb-8 animate-fade-in-delay">
          {subtitle || "Build amazing things with cutting-edge technology"}
        </p>
        <button
          onClick={onCtaClick}
          className="px-8 py-4 bg-white text-purple-600 font-bold rounded-full text-lg hover:shadow-2xl transform hover:scale-105 transition-all duration-300"
        >
          {ctaText || "Get Started"}
        </button>
      </div>

      <div className="absolute bottom-0 left-0 right-0 h-24 bg-gradient-to-t from-white to-transparent"></div>
    </section>
  );
};""",
    },
    {
        "id": "form-login",
        "name": "Login Form",
        "keywords": ["form", "login", "auth", "signin", "email", "password"],
        "code": """const LoginForm = ({ onSubmit }) => {
  const [formData, setFormData] = React.useState({ email: '', password: '' });

  const handleSubmit = (e) => {
    e.preventDefault();
    onSubmit(formData);
  };

  return (
    <form onSubmit={handleSubmit} className="w-full max-w-md mx-auto p-8 bg-white rounded-2xl shadow-xl">
      <h2 className="text-3xl font-bold text-gray-900 mb-6">Sign In</h2>

      <div className="mb-4">
        <label className="block text-gray-700 text-sm font-medium mb-2">Email</label>
        <input
          type="email"
          value={formData.email}
          onChange={(e) => setFormData({...formData, email: e.target.value})}
          className="w-full px-4 py-3 border border-gray-300 rounded-lg focus:ring-2 focus:ring-purple-500 focus:border-transparent"
          required
        />
      </div>

      <div className="mb-6">
        <label className="block text-gray-700 text-sm font-medium mb-2">Password</label>
        <input
          type="password"
          value={formData.password}
          onChange={(e) => setFormData({...formData, password: e.target.value})}
          className="w-full px-4 py-3 border border-gray-300 rounded-lg focus:ring-2 focus:ring-purple-500 focus:border-transparent"
          required
        />
      </div>

      <button
        type="submit"
        className="w-full py-3 bg-gradient-to-r from-purple-500 to-pink-500 text-white font-bold rounded-lg hover:shadow-lg transform hover:scale-105 transition-all duration-300"
      >
        Sign In
      </button>
    </form>
  );
};""",
    },
    {
        "id": "navbar-modern",
        "name": "Modern Navigation Bar",
        "keywords": ["nav", "navbar", "navigation", "menu", "header"],
        "code": """const NavigationBar = ({ logo, links = [], onLinkClick }) => {
  const [mobileMenuOpen, setMobileMenuOpen] = React.useState(false);

  return (
    <nav className="fixed top-0 left-0 right-0 z-50 bg-white/80 backdrop-blur-lg border-b border-gray-200">
      <div className="max-w-7xl mx-auto px-4 sm:px-6 lg:px-8">
        <div className="flex items-center justify-between h-16">
          <div className="flex items-center">
            <div className="text-2xl font-bold text-gray-900">{logo || "Logo"}</div>
          </div>

          <div className="hidden md:block">
            <div className="ml-10 flex items-baseline space-x-4">
              {links.map((link, index) => (
                <a
                  key={index}
                  href={link.href}
                  onClick={(e) => { e.preventDefault(); onLinkClick(link); }}
                  className="px-3 py-2 text-gray-700 hover:text-purple-600 font-medium transition-colors"
                >
                  {link.label}
                </a>
              ))}
            </div>
          </div>

          <div className="md:hidden">
            <button
              onClick={() => setMobileMenuOpen(!mobileMenuOpen)}
              className="p-2 rounded-md text-gray-700 hover:text-purple-600"
            >
              <svg className="h-6 w-6" fill="none" viewBox="0 0 24 24" stroke="currentColor">
                <path strokeLinecap="round" strokeLinejoin="round" strokeWidth={2} d={mobileMenuOpen ? "M6 18L18 6M6 6l12 12" : "M4 6h16M4 12h16M4 18h16"} />
              </svg>
            </button>
          </div>
        </div>
      </div>
    </nav>
  );
};""",
    },
]

# keyword -> template id; a prompt containing the keyword gives that template a fixed bonus
PRIORITY_OVERRIDES: Dict[str, str] = {
    "glow": "button-glow",
}

PRIORITY_BONUS = 10
