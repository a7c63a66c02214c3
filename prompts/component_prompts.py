# Component Prompt Templates for Gemini-backed code generation
# Kept short: the model returns one self-contained React component

COMMON_INSTRUCTIONS = """
**OUTPUT FORMAT:**
- Raw JavaScript/JSX only - NO explanations/markdown fences
- One functional React component declared as an arrow function: `const Name = (props) => ...`
- End with `export default Name;`
- No imports: `React` is available globally, use `React.useState` for state

**REQUIREMENTS:**
- Style exclusively with Tailwind CSS utility classes
- Sensible default props so the component renders without arguments
- Hover and focus states, accessible labels and semantic elements
- No external files, network calls or placeholder Lorem ipsum
"""

COMPONENT_PROMPT = f"""{COMMON_INSTRUCTIONS}

**Component Type:** {{search_query}}
**Destination File:** {{current_file}}

**User Request:** "{{user_prompt}}"
"""

FENCE_PATTERN_LANGS = ("```jsx", "```tsx", "```javascript", "```js", "```typescript", "```ts", "```")


def build_component_prompt(prompt: str, search_query: str = None, current_file: str = None) -> str:
    return COMPONENT_PROMPT.format(
        user_prompt=prompt.replace('"', "'"),
        search_query=search_query or "any",
        current_file=current_file or "not specified",
    )


def clean_code_response(code: str) -> str:
    """Strip markdown fences and surrounding whitespace from a model response."""
    cleaned = code.strip()
    for fence in FENCE_PATTERN_LANGS:
        if cleaned.startswith(fence):
            cleaned = cleaned[len(fence):]
            break
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()
