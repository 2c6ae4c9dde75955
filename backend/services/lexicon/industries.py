"""Per-industry keyword tables.

Each industry maps to an ordered tuple of KeywordEntry. Order is the
declaration order and is what the keyword matcher reports in. Terms are
lower-case; matching is whole-word and case-insensitive, so terms may
contain regex metacharacters ("c++", "ci/cd") without escaping here.

Weights: 3 = core skill for the field, 2 = strong signal, 1 = general.
"""

from types import MappingProxyType

from services.lexicon.base import KeywordEntry, build_lexicon, keyword_group as kg

DEFAULT_INDUSTRY = "tech"

_TECH = build_lexicon(
    kg("programming_languages", 3,
       "python", "javascript", "typescript", "java", "c++", "c#", "sql", "rust"),
    kg("frameworks", 2, "react", "node.js", "django", "spring", "angular", "vue"),
    kg("cloud_devops", 2, "aws", "azure", "docker", "kubernetes", "ci/cd", "terraform"),
    kg("data", 2, "postgresql", "mongodb", "redis", "machine learning"),
    kg("practices", 1,
       "agile", "scrum", "git", "rest api", "microservices", "unit testing", "code review"),
    kg("soft_skills", 1, "leadership", "communication", "teamwork", "problem solving", "mentoring"),
)

_FINANCE = build_lexicon(
    kg("analysis", 3,
       "financial modeling", "financial analysis", "valuation", "forecasting", "budgeting"),
    kg("accounting", 3, "gaap", "ifrs", "reconciliation", "general ledger", "audit"),
    kg("markets", 2, "equity", "fixed income", "derivatives", "portfolio management", "risk management"),
    kg("tools", 2, "excel", "bloomberg", "sap", "vba", "power bi"),
    kg("compliance", 2, "sox", "kyc", "aml", "regulatory reporting"),
    kg("credentials", 1, "cfa", "cpa", "acca", "frm"),
    kg("soft_skills", 1, "attention to detail", "stakeholder management", "communication"),
)

_MARKETING = build_lexicon(
    kg("digital", 3, "seo", "sem", "ppc", "content marketing", "social media", "email marketing"),
    kg("analytics", 3, "google analytics", "a/b testing", "conversion rate", "roi", "kpi"),
    kg("strategy", 2, "brand management", "market research", "go-to-market", "campaign management",
       "segmentation"),
    kg("tools", 2, "hubspot", "salesforce", "mailchimp", "google ads", "hootsuite"),
    kg("creative", 1, "copywriting", "storytelling", "content strategy"),
    kg("soft_skills", 1, "creativity", "communication", "collaboration"),
)

_HEALTHCARE = build_lexicon(
    kg("clinical", 3, "patient care", "diagnosis", "treatment planning", "triage", "medication administration"),
    kg("compliance", 3, "hipaa", "infection control", "patient safety", "clinical governance"),
    kg("systems", 2, "ehr", "emr", "epic", "cerner", "medical coding"),
    kg("specialties", 2, "nursing", "pharmacy", "radiology", "physiotherapy", "pediatrics"),
    kg("certifications", 1, "bls", "acls", "rn", "cpr"),
    kg("soft_skills", 1, "empathy", "communication", "teamwork"),
)

_EDUCATION = build_lexicon(
    kg("teaching", 3, "curriculum development", "lesson planning", "classroom management",
       "differentiated instruction", "assessment"),
    kg("pedagogy", 2, "blended learning", "inquiry-based learning", "special education",
       "student engagement"),
    kg("technology", 2, "google classroom", "moodle", "canvas", "edtech"),
    kg("administration", 2, "accreditation", "parent communication", "student records"),
    kg("credentials", 1, "pgce", "teaching license", "tesol", "tefl"),
    kg("soft_skills", 1, "patience", "mentoring", "communication"),
)

_MANUFACTURING_ENGINEERING = build_lexicon(
    kg("engineering", 3, "cad", "solidworks", "autocad", "gd&t", "fea", "product design"),
    kg("production", 3, "lean manufacturing", "six sigma", "kaizen", "5s", "process improvement"),
    kg("quality", 2, "iso 9001", "root cause analysis", "fmea", "quality control", "spc"),
    kg("operations", 2, "plc", "cnc", "preventive maintenance", "erp", "mrp"),
    kg("safety", 1, "osha", "hse", "risk assessment"),
    kg("soft_skills", 1, "problem solving", "teamwork", "attention to detail"),
)

_SALES = build_lexicon(
    kg("selling", 3, "business development", "lead generation", "prospecting", "closing",
       "account management"),
    kg("performance", 3, "quota", "revenue growth", "pipeline management", "sales targets"),
    kg("tools", 2, "salesforce", "crm", "hubspot", "linkedin sales navigator"),
    kg("methods", 2, "consultative selling", "solution selling", "negotiation", "cold calling",
       "upselling"),
    kg("relationships", 1, "customer retention", "client relationships", "key accounts"),
    kg("soft_skills", 1, "communication", "persuasion", "resilience"),
)

_HUMAN_RESOURCES = build_lexicon(
    kg("talent", 3, "recruitment", "talent acquisition", "onboarding", "succession planning",
       "performance management"),
    kg("employee_relations", 3, "employee relations", "employment law", "grievance handling",
       "disciplinary procedures"),
    kg("rewards", 2, "compensation", "benefits administration", "payroll", "job evaluation"),
    kg("systems", 2, "hris", "workday", "bamboohr", "ats"),
    kg("development", 1, "learning and development", "training needs analysis", "employee engagement",
       "diversity and inclusion"),
    kg("soft_skills", 1, "confidentiality", "communication", "conflict resolution"),
)

_LEGAL = build_lexicon(
    kg("practice", 3, "litigation", "contract drafting", "legal research", "due diligence",
       "corporate law"),
    kg("advisory", 3, "regulatory compliance", "intellectual property", "mergers and acquisitions",
       "dispute resolution"),
    kg("procedure", 2, "case management", "discovery", "legal writing", "court filings"),
    kg("tools", 2, "westlaw", "lexisnexis", "e-discovery", "document review"),
    kg("credentials", 1, "bar admission", "llb", "jd", "paralegal"),
    kg("soft_skills", 1, "negotiation", "analytical thinking", "attention to detail"),
)

_CREATIVE_DESIGN_ARTS = build_lexicon(
    kg("design", 3, "graphic design", "ui design", "ux design", "typography", "branding",
       "illustration"),
    kg("tools", 3, "adobe photoshop", "adobe illustrator", "indesign", "figma", "sketch"),
    kg("media", 2, "motion graphics", "after effects", "photography", "video editing",
       "3d modeling"),
    kg("process", 2, "wireframing", "prototyping", "design thinking", "user research"),
    kg("portfolio", 1, "art direction", "visual storytelling", "exhibition"),
    kg("soft_skills", 1, "creativity", "collaboration", "feedback"),
)

_HOSPITALITY_TOURISM = build_lexicon(
    kg("guest_services", 3, "guest relations", "customer service", "front desk", "concierge",
       "reservations"),
    kg("operations", 3, "food and beverage", "housekeeping", "event planning", "revenue management"),
    kg("systems", 2, "opera pms", "pos", "booking engine", "channel manager"),
    kg("compliance", 2, "food safety", "haccp", "health and safety"),
    kg("travel", 1, "tour operations", "itinerary planning", "destination management"),
    kg("soft_skills", 1, "multilingual", "teamwork", "communication"),
)

_LOGISTICS_SUPPLY_CHAIN = build_lexicon(
    kg("supply_chain", 3, "supply chain management", "procurement", "demand planning",
       "inventory management", "sourcing"),
    kg("logistics", 3, "warehousing", "distribution", "freight", "last mile", "fleet management"),
    kg("systems", 2, "wms", "tms", "sap", "erp"),
    kg("trade", 2, "customs clearance", "incoterms", "import", "export"),
    kg("improvement", 1, "lean", "cost reduction", "vendor management", "kpi"),
    kg("soft_skills", 1, "negotiation", "problem solving", "communication"),
)

_CONSTRUCTION = build_lexicon(
    kg("project_delivery", 3, "project management", "site management", "scheduling",
       "cost estimation", "quantity surveying"),
    kg("engineering", 3, "structural engineering", "civil engineering", "building codes",
       "blueprint reading"),
    kg("tools", 2, "autocad", "revit", "bim", "primavera", "ms project"),
    kg("safety", 2, "osha", "site safety", "risk assessment", "cscs"),
    kg("contracts", 1, "subcontractor management", "tendering", "procurement"),
    kg("soft_skills", 1, "leadership", "problem solving", "communication"),
)

_ENERGY = build_lexicon(
    kg("generation", 3, "renewable energy", "solar", "wind", "power generation", "grid integration"),
    kg("oil_gas", 3, "upstream", "downstream", "drilling", "reservoir engineering", "pipeline"),
    kg("operations", 2, "scada", "asset management", "maintenance planning", "energy efficiency"),
    kg("compliance", 2, "hse", "environmental compliance", "permitting", "iso 14001"),
    kg("markets", 1, "energy trading", "ppa", "carbon markets"),
    kg("soft_skills", 1, "safety culture", "teamwork", "problem solving"),
)

_GOVERNMENT_PUBLIC_SECTOR = build_lexicon(
    kg("policy", 3, "policy analysis", "policy development", "legislation", "public administration",
       "regulatory affairs"),
    kg("governance", 3, "public procurement", "grant management", "budget management",
       "accountability"),
    kg("delivery", 2, "program management", "service delivery", "stakeholder engagement",
       "public consultation"),
    kg("compliance", 2, "security clearance", "freedom of information", "audit"),
    kg("reporting", 1, "briefing notes", "ministerial correspondence", "report writing"),
    kg("soft_skills", 1, "integrity", "communication", "collaboration"),
)

_NON_PROFIT = build_lexicon(
    kg("fundraising", 3, "fundraising", "grant writing", "donor relations", "major gifts",
       "capital campaigns"),
    kg("programs", 3, "program development", "community outreach", "impact measurement",
       "monitoring and evaluation"),
    kg("operations", 2, "volunteer management", "board relations", "nonprofit management",
       "budget management"),
    kg("advocacy", 2, "advocacy", "public awareness", "partnership development"),
    kg("tools", 1, "raiser's edge", "salesforce", "crm"),
    kg("soft_skills", 1, "passion", "communication", "teamwork"),
)

_SCIENCE_RESEARCH = build_lexicon(
    kg("research", 3, "research design", "data analysis", "statistical analysis", "hypothesis testing",
       "literature review"),
    kg("laboratory", 3, "pcr", "cell culture", "chromatography", "spectroscopy", "microscopy"),
    kg("computation", 2, "python", "matlab", "spss", "bioinformatics"),
    kg("output", 2, "peer-reviewed", "publications", "grant proposals", "conference presentations"),
    kg("compliance", 1, "glp", "lab safety", "ethics approval"),
    kg("soft_skills", 1, "critical thinking", "collaboration", "attention to detail"),
)

_RETAIL = build_lexicon(
    kg("store_operations", 3, "store management", "visual merchandising", "inventory control",
       "loss prevention", "stock replenishment"),
    kg("customer", 3, "customer service", "customer experience", "sales floor", "clienteling"),
    kg("commercial", 2, "merchandising", "category management", "pricing", "promotions",
       "sales targets"),
    kg("systems", 2, "pos", "e-commerce", "omnichannel", "planogram"),
    kg("people", 1, "staff scheduling", "team leadership", "training"),
    kg("soft_skills", 1, "communication", "adaptability", "teamwork"),
)

_MEDIA_ENTERTAINMENT = build_lexicon(
    kg("production", 3, "video production", "post-production", "broadcasting", "editing",
       "content production"),
    kg("content", 3, "journalism", "scriptwriting", "content creation", "storytelling"),
    kg("tools", 2, "premiere pro", "final cut pro", "avid", "pro tools", "after effects"),
    kg("distribution", 2, "social media", "audience development", "streaming", "publishing"),
    kg("business", 1, "licensing", "rights management", "talent management"),
    kg("soft_skills", 1, "creativity", "deadlines", "collaboration"),
)

_CONSULTING = build_lexicon(
    kg("advisory", 3, "strategy", "business analysis", "process improvement", "change management",
       "due diligence"),
    kg("delivery", 3, "client management", "stakeholder management", "project management",
       "workshops"),
    kg("analytics", 2, "financial modeling", "market analysis", "data analysis", "benchmarking"),
    kg("tools", 2, "excel", "powerpoint", "tableau", "power bi"),
    kg("methods", 1, "mece", "root cause analysis", "business case"),
    kg("soft_skills", 1, "problem solving", "presentation skills", "communication"),
)

_CROSS_INDUSTRY_GENERAL = build_lexicon(
    kg("core", 3, "communication", "problem solving", "teamwork", "leadership", "time management"),
    kg("organization", 2, "project management", "organization", "planning", "prioritization"),
    kg("digital", 2, "microsoft office", "excel", "data analysis", "google workspace"),
    kg("interpersonal", 2, "customer service", "collaboration", "negotiation", "adaptability"),
    kg("growth", 1, "critical thinking", "attention to detail", "initiative", "continuous learning"),
)

INDUSTRY_KEYWORDS: "MappingProxyType[str, tuple[KeywordEntry, ...]]" = MappingProxyType({
    "tech": _TECH,
    "finance": _FINANCE,
    "marketing": _MARKETING,
    "healthcare": _HEALTHCARE,
    "education": _EDUCATION,
    "manufacturing_engineering": _MANUFACTURING_ENGINEERING,
    "sales": _SALES,
    "human_resources": _HUMAN_RESOURCES,
    "legal": _LEGAL,
    "creative_design_arts": _CREATIVE_DESIGN_ARTS,
    "hospitality_tourism": _HOSPITALITY_TOURISM,
    "logistics_supply_chain": _LOGISTICS_SUPPLY_CHAIN,
    "construction": _CONSTRUCTION,
    "energy": _ENERGY,
    "government_public_sector": _GOVERNMENT_PUBLIC_SECTOR,
    "non_profit": _NON_PROFIT,
    "science_research": _SCIENCE_RESEARCH,
    "retail": _RETAIL,
    "media_entertainment": _MEDIA_ENTERTAINMENT,
    "consulting": _CONSULTING,
    "cross_industry_general": _CROSS_INDUSTRY_GENERAL,
})
