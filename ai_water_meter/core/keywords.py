"""
Phrase tables for prompt classification.

Each table is an ordered tuple of lowercase phrases. Tables are grouped by
the tier they vote for; tier precedence lives in classifiers.py.
"""

from typing import Tuple

# Reasoning level 3: any match classifies the prompt as complex
COMPLEX_REASONING_PHRASES: Tuple[str, ...] = (
    # Philosophical & ethical
    "ethics", "impact", "philosophy", "moral", "ethical", "values", "justice", "rights", "duty",
    "virtue", "consequentialism", "deontology", "utilitarianism", "existentialism", "metaphysics",
    "epistemology", "ontology", "axiological", "normative", "metaethics", "teleology", "nihilism",
    "relativism", "absolutism", "hedonism", "stoicism", "determinism", "free will", "consciousness",

    # Critical thinking & analysis
    "analyze", "critique", "evaluate", "assess", "examine", "investigate", "review", "scrutinize",
    "critical analysis", "critical thinking", "deconstruct", "implications", "ramifications",
    "nuances", "logical fallacies", "biases", "counterarguments", "limitations", "strengths",
    "weaknesses", "validity", "sound argument", "premise", "inference", "deduction", "induction",
    "syllogism", "dialectic", "rhetoric", "logical consistency", "coherence", "correlation",
    "causation", "confounding variables", "statistical significance", "methodological",

    # Advanced AI/ML concepts
    "create an ai", "make an ai", "design an ai", "artificial intelligence", "neural network",
    "machine learning", "deep learning", "reinforcement learning", "supervised learning",
    "unsupervised learning", "natural language processing", "computer vision", "transformer",
    "attention mechanism", "bert", "gpt", "llm", "large language model", "fine-tuning",
    "embedding", "vectorization", "tokenization", "semantic", "latent space", "generative model",
    "discriminative model", "adversarial network", "backpropagation", "gradient descent",
    "overfitting", "underfitting", "regularization", "hyperparameter", "optimization",

    # Advanced problem solving
    "solve", "optimization problem", "algorithm complexity", "computational complexity",
    "np-complete", "np-hard", "big o notation", "heuristic", "approximation algorithm",
    "dynamic programming", "greedy algorithm", "divide and conquer", "backtracking",
    "branch and bound", "graph theory", "mathematical proof", "theorem", "lemma", "corollary",
    "axiomatic", "mathematical induction",

    # System design & architecture
    "system design", "architecture", "scalability", "fault tolerance", "load balancing",
    "distributed systems", "microservices", "monolithic", "serverless", "cloud native",
    "containerization", "orchestration", "service mesh", "api gateway", "event-driven",
    "cqrs", "event sourcing", "domain driven design", "bounded context", "ubiquitous language",

    # Research & scientific inquiry
    "research", "hypothesis", "scientific method", "control group", "experimental design",
    "variables", "confounding", "statistical analysis", "literature review", "meta-analysis",
    "systematic review", "peer review", "empirical", "theoretical framework", "conceptual model",
    "paradigm", "qualitative research", "quantitative research", "mixed methods", "longitudinal",
    "cross-sectional", "cohort",

    # Why questions & explanations
    "why is", "why are", "why does", "why do", "why can", "why should", "why would", "why might",
    "why has", "why have", "root cause", "fundamental reason", "underlying principles",
    "philosophical basis", "theoretical underpinning", "conceptual foundation", "first principles",
    "epistemological", "ontological", "explain why", "rationalize", "justify", "elucidate",

    # Social, political, economic analysis
    "sociopolitical", "socioeconomic", "geopolitical", "cultural implications", "social construct",
    "social dynamics", "power structures", "economic systems", "political theory", "governance",
    "policy analysis", "institutional analysis", "stakeholder analysis", "comparative analysis",
    "historical context", "societal impact", "demographic factors", "social inequality",
    "systemic issues", "marginalization", "privilege", "intersectionality", "sustainability",

    # Security & risk analysis
    "cybersecurity", "threat model", "vulnerability assessment", "risk analysis", "attack vector",
    "exploit", "mitigation strategy", "security protocol", "cryptographic", "encryption",
    "authentication", "authorization", "zero trust", "defense in depth", "security architecture",
    "penetration testing", "red team", "blue team", "security audit", "compliance", "regulatory",

    # Additional complex topics
    "quantum computing", "blockchain", "cryptography", "game theory", "complexity theory",
    "systems thinking", "chaos theory", "emergent behavior", "cognitive science", "neuroscience",
    "psycholinguistics", "thermodynamics", "relativity", "quantum mechanics", "information theory",
    "network theory", "control theory", "optimization theory", "decision theory", "category theory",
    "topology", "group theory", "linear algebra", "calculus", "differential equations", "statistics",
    "probability theory", "bayesian inference", "stochastic processes", "markov chains",
    "monte carlo simulation", "computational linguistics", "semantic analysis", "discourse analysis",
    "pragmatics", "semiotics", "hermeneutics", "phenomenology", "structuralism", "post-structuralism",
    "deconstruction", "critical theory", "literary theory", "media studies", "cultural studies",
    "anthropological theory", "sociological theory", "psychological theory", "cognitive theory",
    "developmental theory", "evolutionary theory", "ecological theory", "systems theory",
)

# Reasoning level 2: checked only when no complex phrase matched
MODERATE_REASONING_PHRASES: Tuple[str, ...] = (
    # How questions & instructions
    "how to", "how do", "how does", "how can", "how would", "how should", "how might", "how is",
    "how are", "instructions for", "steps to", "guide for", "tutorial on", "process for",
    "procedure for", "method for", "approach to", "technique for", "strategy for", "best practices",

    # Comparisons & relationships
    "compare", "contrast", "versus", "vs", "difference between", "similarities between",
    "advantages and disadvantages", "pros and cons", "benefits and drawbacks",
    "upsides and downsides", "strengths and weaknesses", "positive and negative", "better than",
    "worse than", "preferred over", "compared to", "in relation to", "relative to",
    "in comparison with", "as opposed to",

    # Explanations & descriptions
    "explain", "describe", "clarify", "elaborate on", "elucidate", "illustrate", "demonstrate",
    "show how", "walk through", "break down", "outline", "summarize", "overview", "introduction to",
    "description of", "summary of", "synopsis of", "rundown of", "briefing on", "primer on",

    # Implementation & creation
    "build", "implement", "create", "develop", "establish", "set up", "construct", "generate",
    "produce", "make", "design", "architect", "engineer", "draft", "compose", "formulate",
    "devise", "conceive", "fabricate", "assemble", "configure", "install", "deploy", "provision",

    # Programming & technical
    "write code", "program", "code", "script", "debug", "troubleshoot", "refactor", "optimize",
    "test", "unit test", "integration test", "end-to-end test", "benchmark", "profile",
    "performance tune", "memory management", "garbage collection", "concurrency", "parallelism",
    "synchronization", "asynchronous", "callback", "promise", "async/await", "multithreading",

    # Problem-solving
    "solution to", "solve for", "resolve", "address", "handle", "manage", "deal with", "tackle",
    "approach", "algorithm for", "recipe for", "fix", "patch", "workaround", "bypass", "mitigate",
    "alleviate", "remedy", "treat",

    # Data & information processing
    "process data", "analyze data", "data analysis", "data processing", "data transformation",
    "extract", "transform", "load", "etl", "parse", "filter", "sort", "group", "aggregate",
    "join", "merge", "union", "intersect", "difference", "normalize", "denormalize", "index",
    "query", "search", "retrieve", "fetch", "store", "persist", "cache", "buffer", "batch",

    # Web & application development
    "web development", "app development", "front-end", "back-end", "full-stack", "client-side",
    "server-side", "database", "api", "rest", "graphql", "soap", "http", "https", "tcp/ip",
    "dns", "routing", "middleware", "authentication", "authorization", "session management",
    "state management", "data binding", "templating", "responsive design", "mobile first",

    # Tools & technologies
    "framework", "library", "toolkit", "sdk", "ide", "editor", "compiler", "interpreter",
    "runtime", "virtual machine", "container", "docker", "kubernetes", "terraform", "ansible",
    "jenkins", "ci/cd", "git", "version control", "package manager", "dependency management",

    # Analytics & reporting
    "report on", "dashboard", "metrics", "kpi", "analytics", "visualization", "chart", "graph",
    "plot", "histogram", "scatter plot", "line chart", "bar chart", "pie chart", "heat map",
    "treemap", "funnel chart", "gauge chart", "sparkline", "data table", "pivot table",

    # Learning & knowledge
    "learn about", "understand", "comprehend", "grasp", "master", "study", "research", "examine",
    "investigate", "explore", "discover", "uncover", "find out", "determine", "ascertain",
    "identify", "recognize", "distinguish", "differentiate", "discern", "perceive", "observe",

    # Communication & documentation
    "document", "comment", "annotate", "label", "tag", "mark", "highlight", "emphasize", "stress",
    "underline", "bold", "italicize", "format", "style", "layout", "structure", "organize",
    "arrange", "order", "sequence", "prioritize", "rank", "rate", "grade", "classify",
    "categorize",

    # Business & management
    "business model", "business plan", "strategic plan", "operational plan", "tactical plan",
    "project plan", "risk management", "change management", "performance management",
    "quality management", "resource management", "time management", "cost management",
    "stakeholder management", "communications management", "procurement management",
    "integration management", "scope management",

    # Additional moderate tasks
    "calculate", "compute", "estimate", "approximate", "forecast", "predict", "project",
    "extrapolate", "interpolate", "derive", "deduce", "infer", "conclude", "reason",
    "rationalize", "justify", "validate", "verify", "confirm", "corroborate", "substantiate",
    "prove", "disprove", "rebut", "refute", "counter", "argue", "debate", "discuss", "consider",
    "contemplate", "ponder", "reflect", "meditate", "ruminate", "deliberate", "weigh", "evaluate",
    "appraise", "assess", "gauge", "measure", "quantify", "qualify", "characterize", "depict",
    "portray", "represent", "symbolize", "signify", "denote", "connote", "imply", "suggest",
    "indicate", "signal", "convey", "communicate", "express", "articulate", "vocalize",
    "verbalize", "phrase", "word", "conceptualize", "abstract", "generalize", "specialize",
    "particularize", "instantiate", "exemplify", "model", "diagram", "sketch",
)

# Openness level 2: any match classifies the prompt as highly open-ended
HIGH_OPENNESS_PHRASES: Tuple[str, ...] = (
    # Creative writing & storytelling
    "imagine", "write a story", "creative writing", "short story", "novel", "fiction", "narrative",
    "tale", "storyline", "plot", "character", "protagonist", "antagonist", "setting", "scene",
    "dialogue", "monologue", "first-person", "third-person", "point of view", "perspective",
    "narration", "exposition", "rising action", "climax", "falling action", "resolution",
    "denouement", "conflict", "tension", "drama", "comedy", "tragedy", "romance", "adventure",
    "fantasy", "science fiction", "historical fiction", "mystery", "thriller", "horror", "western",
    "fairy tale", "fable", "myth", "legend", "epic", "saga", "parable", "allegory", "novella",
    "flash fiction", "microfiction", "vignette", "anecdote", "memoir", "autobiography",
    "biography",

    # Generation & creation requests
    "generate", "create", "invent", "design", "develop", "build", "construct", "fashion",
    "fabricate", "produce", "make", "craft", "forge", "compose", "formulate", "devise", "conceive",
    "dream up", "conjure", "concoct", "cook up", "come up with", "think of", "originate",
    "establish", "form", "found", "institute", "constitute", "erect", "assemble", "put together",
    "piece together",

    # Artistic creation
    "poem", "poetry", "sonnet", "haiku", "limerick", "rhyme", "verse", "stanza", "meter", "rhythm",
    "lyrics", "song", "ballad", "ode", "elegy", "villanelle", "sestina", "free verse", "prose poem",
    "concrete poetry", "slam poetry", "epic poem", "narrative poem", "dramatic poem", "lyrical",
    "metaphorical", "symbolic", "allegoric", "figurative", "imagery", "simile", "metaphor",
    "personification", "hyperbole", "alliteration", "assonance", "consonance", "onomatopoeia",

    # Hypothetical scenarios
    "what if", "suppose", "imagine if", "scenario where", "in a world where", "alternate reality",
    "alternative history", "counterfactual", "hypothetical situation", "thought experiment",
    "mental exercise", "speculative", "conjecture", "supposition", "postulate", "presuppose",
    "assume", "presume", "theoretical case", "hypothesize", "posit", "theorize", "speculate",

    # Exploration & brainstorming
    "brainstorm", "ideate", "explore", "discover", "investigate", "probe", "delve into", "examine",
    "look into", "research", "study", "analyze", "assess", "evaluate", "appraise", "review",
    "survey", "inspect", "scrutinize", "peruse", "browse", "scan", "sift through", "comb through",
    "dig into", "unearth", "uncover", "reveal", "disclose", "expose", "bring to light",
    "illuminate",

    # Open-ended questions
    "how might", "how could", "how would", "tell me", "share with me", "suggest", "recommend",
    "propose", "put forward", "advocate", "endorse", "champion", "back", "support", "promote",
    "encourage", "advance", "further", "foster", "nurture", "cultivate", "incubate", "hatch",

    # Visual & design creation
    "draw", "sketch", "illustrate", "paint", "depict", "render", "portray", "represent",
    "visualize", "envision", "picture", "image", "conceptualize", "mockup", "wireframe",
    "prototype", "model", "blueprint", "schematic", "diagram", "chart", "graph", "map", "plan",
    "layout", "architecture", "structure", "framework", "scaffold", "skeleton", "outline",
    "rough draft",

    # Innovation & breakthrough thinking
    "innovate", "disrupt", "revolutionize", "transform", "reinvent", "reimagine", "rethink",
    "redefine", "reconceive", "reconceptualize", "restructure", "reorganize", "reform", "remake",
    "remodel", "reshape", "reconfigure", "recalibrate", "reorient", "redirect", "repurpose",
    "upcycle", "breakthrough", "cutting-edge", "state-of-the-art", "avant-garde", "pioneering",

    # Game & interactive experiences
    "game", "gameplay", "mechanic", "rule", "player", "turn", "round", "move", "action",
    "reaction", "strategy", "tactic", "maneuver", "play", "contest", "competition", "challenge",
    "quest", "mission", "objective", "goal", "achievement", "reward", "penalty", "puzzle", "maze",
    "riddle", "enigma", "conundrum", "interactive", "engagement", "immersion", "experience",

    # Cultural and generational references
    "gen z", "generation z", "zoomer", "zoomers", "tiktok", "meme", "memes", "viral", "trending",
    "influencer", "influencers", "clout", "flex", "aesthetic", "vibe", "vibes", "vibe check",
    "mood", "energy", "stan", "fandom", "ship", "shipping", "tea", "spill the tea", "shade",
    "lowkey", "highkey", "slay", "slaying", "based", "cringe", "cringey", "sus", "yeet", "dank",
    "fit", "outfit", "drip", "snack", "snatched", "fire", "lit", "fam", "no cap", "goat",
    "ghost", "ghosted", "catfish", "finsta", "rizz", "bussin", "bet", "facts", "cap", "deadass",
    "simp", "savage", "toxic", "basic", "zaddy", "periodt", "wig", "sending me", "rent free",
    "main character", "villain era", "understood the assignment", "cheugy", "giving",
    "gaslighting",

    # Subjective assessment terms
    "cool", "coolness", "popularity", "trendy", "hip", "fashionable", "stylish", "on trend",
    "in style", "in fashion", "in vogue", "cutting edge", "ahead of the curve", "popular",
    "unpopular", "acceptable", "unacceptable", "appropriate", "inappropriate", "preferred",
    "opinion", "viewpoint", "stance", "position", "attitude", "mindset", "outlook", "judgment",
    "assessment", "evaluation", "appraisal", "rating", "ranking", "scoring", "interpretation",
    "perception", "impression", "sentiment", "feeling", "emotion", "response", "reception",
    "feedback", "critique", "criticism", "analysis", "examination", "investigation", "inquiry",
    "poll", "consensus", "agreement", "disagreement", "controversy",

    # Creative assessment phrases
    "determine if", "figure out if", "assess if", "evaluate if", "judge if", "decide if",
    "rate", "rank", "grade", "score", "classify", "categorize", "label", "tag", "mark",
    "brand", "stamp", "badge", "measure", "gauge", "barometer", "yardstick", "benchmark",
    "standard", "criterion", "norm", "convention", "custom", "tradition", "practice", "habit",
    "routine", "ritual", "ceremony", "observance", "rite", "protocol",
)

# Openness level 1: checked only when no high-openness phrase matched
MEDIUM_OPENNESS_PHRASES: Tuple[str, ...] = (
    # Explanatory requests
    "explain", "clarify", "elucidate", "illustrate", "demonstrate", "show", "tell", "inform",
    "educate", "instruct", "teach", "train", "coach", "mentor", "guide", "direct", "steer",
    "lead", "conduct", "usher", "escort", "accompany", "assist", "aid", "help", "support",
    "facilitate", "enable", "empower", "equip", "prepare", "ready", "groom", "prime", "position",

    # Descriptive requests
    "describe", "depict", "portray", "characterize", "represent", "express", "articulate",
    "voice", "verbalize", "phrase", "word", "formulate", "state", "declare", "pronounce",
    "proclaim", "announce", "communicate", "convey", "relay", "transmit", "dispatch",
    "disseminate", "spread", "broadcast", "publicize", "advertise", "promote", "market", "sell",
    "pitch", "present",

    # Writing tasks with parameters
    "write", "compose", "draft", "author", "pen", "script", "record", "document", "chronicle",
    "journal", "log", "note", "minute", "register", "catalog", "list", "itemize", "enumerate",
    "detail", "specify", "particularize", "pinpoint", "nail down", "zero in on", "focus on",
    "concentrate on", "emphasize", "highlight", "underscore", "stress", "accentuate", "feature",

    # Summarization tasks
    "summarize", "recap", "review", "sum up", "wrap up", "round up", "conclude", "finalize",
    "complete", "finish", "end", "terminate", "cease", "halt", "stop", "discontinue", "desist",
    "refrain", "abstain", "forbear", "hold back", "restrain", "contain", "limit", "restrict",
    "confine", "constrain", "narrow", "reduce", "decrease", "diminish", "lessen", "minimize",

    # Semi-structured questions
    "can you", "would you", "could you", "will you", "may you", "might you", "shall you",
    "should you", "do you", "are you", "is it", "was it", "were they", "have you", "has it",
    "had they", "does it", "did they", "who is", "what is", "where is", "when is", "why is",
    "how is", "which is", "whose is", "whom is", "whatever", "whenever", "wherever", "whoever",

    # Help requests
    "help me", "assist me", "aid me", "support me", "guide me", "direct me", "lead me", "show me",
    "tell me", "inform me", "educate me", "instruct me", "teach me", "train me", "coach me",
    "mentor me", "advise me", "counsel me", "consult me", "recommend to me", "suggest to me",
    "propose to me", "offer me", "provide me", "furnish me", "supply me", "equip me",
    "outfit me",

    # Information gathering
    "information about", "details on", "facts about", "data on", "statistics for", "figures on",
    "numbers for", "metrics about", "measurements of", "dimensions for", "proportions of",
    "ratios for", "percentages of", "fractions of", "portions of", "segments of", "sections of",
    "parts of", "components of", "elements of", "aspects of", "features of",
    "characteristics of",

    # Analysis requests
    "analyze", "examine", "inspect", "scrutinize", "study", "investigate", "explore", "probe",
    "research", "look into", "delve into", "dig into", "inquire about", "query about",
    "ask about", "question about", "interrogate about", "interview about", "survey about",
    "poll about", "canvas about", "assess", "evaluate", "appraise", "estimate", "gauge",
    "measure", "weigh",

    # Comparison requests
    "compare", "contrast", "differentiate", "distinguish", "discriminate", "separate", "divide",
    "split", "cleave", "sever", "dissect", "anatomize", "break down", "dismantle",
    "disassemble", "take apart", "decompose", "dissolve", "resolve", "convert", "change",
    "transform", "transmute", "metamorphose", "evolve", "develop", "grow", "mature", "ripen",

    # Planning & organization
    "plan", "organize", "arrange", "order", "structure", "systematic", "methodical", "orderly",
    "neat", "tidy", "clean", "uncluttered", "streamlined", "efficient", "effective", "productive",
    "fruitful", "profitable", "beneficial", "advantageous", "favorable", "positive", "good",
    "excellent", "superior", "outstanding", "exceptional", "extraordinary", "remarkable",
    "notable",

    # Procedural requests
    "procedure for", "process of", "method for", "technique of", "approach to", "way of",
    "means of", "manner of", "mode of", "fashion of", "style of", "form of", "type of",
    "kind of", "sort of", "class of", "category of", "group of", "set of", "collection of",
    "assortment of", "variety of", "diversity of", "range of", "spectrum of", "gamut of",
    "scale of", "scope of", "extent of",

    # Additional medium-open indicators
    "outline", "sketch", "rough out", "block out", "lay out", "map out", "chart", "diagram",
    "graph", "plot", "scheme", "design", "blueprint", "mock up", "model", "prototype",
    "pilot", "test", "trial", "experiment", "essay", "attempt", "endeavor", "undertaking",
    "venture", "enterprise", "project", "task", "job", "responsibility", "obligation",
    "commitment",
)
