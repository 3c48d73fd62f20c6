# 개발용 샘플 회사 데이터
SAMPLE_COMPANIES = [
    {
        "slug": "acme-corp",
        "name": "Acme Corporation",
        "theme": {
            "primary": "#3b82f6",
            "secondary": "#8b5cf6",
            "accent": "#10b981",
            "logo": "",
            "banner": "",
            "video": "",
        },
        "sections": [
            {
                "id": "1",
                "type": "about",
                "title": "About Us",
                "content": "We are a leading technology company...",
                "order": 0,
                "is_visible": True,
            },
            {
                "id": "2",
                "type": "benefits",
                "title": "Benefits",
                "content": "Competitive salary, health insurance, remote work...",
                "order": 1,
                "is_visible": True,
            },
        ],
        "jobs": [
            {
                "id": "1",
                "title": "Senior Software Engineer",
                "description": "We are looking for an experienced software engineer...",
                "location": "San Francisco, CA",
                "job_type": "full-time",
                "department": "Engineering",
                "requirements": ["5+ years experience", "React, Node.js", "Team leadership"],
                "benefits": ["Health insurance", "401k", "Remote work"],
                "is_active": True,
            },
            {
                "id": "2",
                "title": "Product Designer",
                "description": "Join our design team...",
                "location": "New York, NY",
                "job_type": "full-time",
                "department": "Design",
                "requirements": ["3+ years experience", "Figma, UI/UX"],
                "benefits": ["Health insurance", "Flexible hours"],
                "is_active": True,
            },
        ],
    },
    {
        "slug": "tech-startup",
        "name": "Tech Startup Inc",
        "theme": {
            "primary": "#ef4444",
            "secondary": "#f59e0b",
            "accent": "#06b6d4",
        },
        "sections": [
            {
                "id": "1",
                "type": "about",
                "title": "Our Story",
                "content": "Founded in 2020...",
                "order": 0,
                "is_visible": True,
            },
        ],
        "jobs": [
            {
                "id": "1",
                "title": "Frontend Developer",
                "description": "Build amazing user interfaces...",
                "location": "Remote",
                "job_type": "full-time",
                "department": "Engineering",
                "requirements": ["React, TypeScript", "2+ years"],
                "benefits": ["Remote work", "Stock options"],
                "is_active": True,
            },
        ],
    },
]
