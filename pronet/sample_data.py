"""Template pools used by the demo data generator."""

JOB_TITLES = [
    "Senior Software Engineer", "Product Manager", "Data Scientist", "UX Designer",
    "Marketing Manager", "Sales Director", "DevOps Engineer", "Business Analyst",
    "Frontend Developer", "Backend Engineer", "Mobile Developer", "QA Engineer",
    "Technical Lead", "Engineering Manager", "Growth Manager", "Content Manager",
]

# Titles that trending analysis folds variants into
COMMON_TITLES = [
    "Software Engineer", "Product Manager", "Data Scientist", "Designer",
    "Marketing Manager", "Sales Manager",
]

COMPANIES = [
    "Apple", "Google", "Microsoft", "Meta", "Amazon", "Netflix", "Tesla",
    "Spotify", "Uber", "Airbnb", "Stripe", "Figma", "Notion", "Slack",
    "Zoom", "Dropbox", "Adobe", "Salesforce", "Oracle", "IBM", "Intel",
    "NVIDIA", "PayPal", "Square", "Twitter", "Pinterest", "Snapchat",
    "TikTok", "LinkedIn", "GitHub", "Atlassian", "ServiceNow", "Shopify",
    "Coinbase", "Robinhood", "DoorDash", "Instacart", "Lyft", "Palantir",
    "Snowflake", "Databricks", "MongoDB", "Redis", "Elastic", "Docker",
    "Kubernetes", "Jenkins", "GitLab", "CircleCI", "Splunk", "New Relic",
]

JOB_LOCATIONS = [
    "San Francisco, CA", "New York, NY", "Seattle, WA", "Austin, TX", "Boston, MA",
    "Los Angeles, CA", "Chicago, IL", "Denver, CO", "Remote", "London, UK", "Toronto, ON",
]

INDUSTRIES = [
    "Technology", "Software Development", "E-commerce", "Financial Services",
    "Healthcare", "Education", "Media & Entertainment", "Automotive",
    "Aerospace", "Biotechnology", "Telecommunications", "Gaming",
    "Artificial Intelligence", "Cybersecurity", "Cloud Computing",
    "Data Analytics", "DevOps", "Mobile Development", "Web Development",
    "Blockchain", "Internet of Things", "Machine Learning", "Robotics",
    "Virtual Reality", "Augmented Reality", "Social Media", "Streaming",
    "Food Delivery", "Transportation", "Real Estate", "Insurance",
    "Consulting", "Marketing", "Sales", "Human Resources", "Legal",
]

SKILLS = [
    # Programming languages
    "Swift", "Kotlin", "Java", "JavaScript", "TypeScript", "Python",
    "Go", "Rust", "C++", "C#", "PHP", "Ruby", "Scala", "Dart",
    # Mobile
    "iOS Development", "Android Development", "React Native", "Flutter",
    "UIKit", "SwiftUI", "Jetpack Compose", "Xamarin", "Ionic",
    # Web
    "React", "Vue.js", "Angular", "Node.js", "Express.js", "Next.js",
    "HTML", "CSS", "SASS", "Webpack", "Vite", "GraphQL", "REST APIs",
    # Cloud & infrastructure
    "AWS", "Google Cloud", "Azure", "Docker", "Kubernetes", "Terraform",
    "Jenkins", "GitLab CI/CD", "Ansible", "Prometheus", "Grafana",
    # Databases
    "MySQL", "PostgreSQL", "MongoDB", "Redis", "Elasticsearch",
    "DynamoDB", "Cassandra", "Neo4j", "SQLite", "Oracle",
    # Data science & ML
    "Machine Learning", "Deep Learning", "TensorFlow", "PyTorch",
    "Scikit-learn", "Pandas", "NumPy", "R", "Tableau", "Power BI",
    # Design & UX
    "UI/UX Design", "Figma", "Sketch", "Adobe Creative Suite",
    "Prototyping", "User Research", "Wireframing", "Design Systems",
    # Project management
    "Agile", "Scrum", "Kanban", "Jira", "Confluence", "Notion",
    "Project Management", "Product Management", "Roadmap Planning",
    # Business & marketing
    "Digital Marketing", "SEO", "SEM", "Social Media Marketing",
    "Content Marketing", "Email Marketing", "Analytics", "A/B Testing",
    # Soft skills
    "Leadership", "Communication", "Problem Solving", "Team Collaboration",
    "Critical Thinking", "Time Management", "Adaptability", "Creativity",
]

JOB_DESCRIPTIONS = [
    "Join our dynamic team and make a significant impact on our products used by millions "
    "of users worldwide. We're looking for passionate individuals who thrive in collaborative "
    "environments.",
    "We are seeking a talented professional to help drive innovation and growth at our "
    "fast-paced company. This role offers excellent opportunities for career development "
    "and learning.",
    "Be part of a mission-driven organization that values creativity, innovation, and "
    "work-life balance. Help us build the future of technology while growing your career.",
    "Exciting opportunity to work with cutting-edge technology and a world-class team. We "
    "offer competitive compensation, comprehensive benefits, and a culture of continuous "
    "learning.",
]

COMMON_REQUIREMENTS = [
    "Bachelor's degree in relevant field or equivalent experience",
    "Strong problem-solving and analytical skills",
    "Excellent communication and collaboration abilities",
    "Experience with agile development methodologies",
    "Passion for learning and staying current with industry trends",
]

TECH_REQUIREMENTS = [
    "3+ years of experience in software development",
    "Proficiency in modern programming languages",
    "Experience with cloud platforms (AWS, Azure, GCP)",
    "Knowledge of database systems and SQL",
]

DOMAIN_REQUIREMENTS = [
    "Domain expertise in relevant area",
    "Experience with project management tools",
]

RESPONSIBILITIES = [
    "Collaborate with cross-functional teams to deliver high-quality solutions",
    "Participate in planning and design discussions",
    "Contribute to code reviews and technical documentation",
    "Mentor junior team members and share knowledge",
    "Stay current with industry best practices and emerging technologies",
]

BENEFITS = [
    "Competitive salary and equity package",
    "Comprehensive health, dental, and vision insurance",
    "401(k) with company matching",
    "Flexible PTO and work-from-home options",
    "Professional development budget",
    "Catered meals and snacks",
    "Wellness programs and gym membership",
]

BASE_SALARY_BY_LEVEL = {
    "internship": 50000,
    "entry_level": 70000,
    "associate": 90000,
    "mid_level": 120000,
    "senior": 150000,
    "director": 200000,
    "executive": 300000,
}

POST_AUTHORS = [
    ("Michael Smith", "Software Engineer at Apple"),
    ("Lisa Wang", "Data Scientist at Netflix"),
    ("James Wilson", "UX Designer at Adobe"),
    ("Rachel Kim", "Sales Director at Salesforce"),
    ("Tom Anderson", "Operations Manager at Tesla"),
]

POST_CONTENTS = [
    "Just completed a major project milestone! The collaboration between cross-functional "
    "teams has been outstanding. #TeamWork #ProjectManagement #Success",
    "Attended an incredible industry conference today. The insights on AI and machine "
    "learning were game-changing! #AI #MachineLearning #Conference",
    "Proud to announce that our team achieved 99.9% uptime this quarter! Reliability and "
    "performance are at the heart of everything we do. #Performance #Engineering #Quality",
    "Launching our new mentorship program next month. Excited to help the next generation "
    "of professionals grow! #Mentorship #Leadership #Growth",
    "The future of work is remote-first, and we're leading the charge. Our productivity has "
    "increased 40% since going fully distributed! #RemoteWork #Productivity #Future",
]

FEATURED_POSTS = [
    {
        "author": "Sarah Johnson",
        "headline": "Senior Product Manager at Microsoft",
        "content": "Excited to share that our team just launched a groundbreaking AI feature "
                   "that will transform how professionals collaborate! The journey from concept "
                   "to reality has been incredible.\n\n#Innovation #AI #ProductManagement "
                   "#Microsoft #TeamWork",
        "image": "business_meeting",
        "likes": 234,
        "comments": 45,
        "shares": 12,
    },
    {
        "author": "David Chen",
        "headline": "Tech Lead at Google",
        "content": "Just finished an amazing 3-day hackathon where we built solutions for "
                   "sustainable technology. The creativity and passion of developers worldwide "
                   "continues to inspire me!\n\n#Hackathon #Sustainability #Technology "
                   "#Innovation #Google",
        "image": "technology",
        "likes": 189,
        "comments": 32,
        "shares": 8,
    },
    {
        "author": "Emily Rodriguez",
        "headline": "Marketing Director at Startup Inc.",
        "content": "Reflecting on Q4 results: 300% growth in user acquisition and 95% customer "
                   "satisfaction rate! This wouldn't be possible without our incredible team and "
                   "the trust our customers place in us.\n\n#Growth #Marketing #Startup "
                   "#CustomerSuccess #TeamWin",
        "image": "conference",
        "likes": 156,
        "comments": 28,
        "shares": 15,
    },
]

POST_IMAGES = ["business_meeting", "team_work", "office", "startup"]

COMMENT_AUTHORS = ["Alex Thompson", "Maria Garcia", "John Doe", "Jane Smith", "Robert Johnson"]

COMMENT_CONTENTS = [
    "Great insights! Thanks for sharing this.",
    "Congratulations on this achievement!",
    "This is exactly what I needed to read today.",
    "Love the perspective you've shared here.",
    "Keep up the excellent work!",
]

SUGGESTED_USERS = [
    ("alice.cooper@example.com", "Alice Cooper", "Senior Software Engineer at TechCorp",
     "Passionate about creating innovative software solutions that make a difference.",
     "San Francisco, CA", ["Swift", "iOS", "SwiftUI", "UIKit"]),
    ("bob.johnson@example.com", "Bob Johnson", "Product Manager at InnovateCo",
     "Building products that users love with a focus on customer experience.",
     "New York, NY", ["Product Management", "Strategy", "Analytics"]),
    ("carol.williams@example.com", "Carol Williams", "UX Designer at DesignStudio",
     "Designing intuitive interfaces that solve real-world problems.",
     "Seattle, WA", ["UI/UX", "Figma", "Sketch", "Design Systems"]),
    ("daniel.brown@example.com", "Daniel Brown", "Data Scientist at Analytics Inc",
     "Turning data into actionable insights for business growth.",
     "Austin, TX", ["Python", "Machine Learning", "Data Analysis"]),
    ("emma.davis@example.com", "Emma Davis", "Marketing Director at BrandCorp",
     "Helping brands tell their story in the digital age.",
     "Boston, MA", ["Marketing", "Brand Strategy", "Digital Marketing"]),
    ("frank.miller@example.com", "Frank Miller", "Full Stack Developer at StartupXYZ",
     "Full stack developer with expertise in modern web technologies.",
     "Los Angeles, CA", ["JavaScript", "React", "Node.js", "TypeScript"]),
    ("grace.wilson@example.com", "Grace Wilson", "DevOps Engineer at CloudTech",
     "Automating infrastructure to enable seamless deployments.",
     "Chicago, IL", ["Docker", "Kubernetes", "AWS", "CI/CD"]),
    ("henry.moore@example.com", "Henry Moore", "Business Analyst at ConsultingGroup",
     "Bridging the gap between business and technology.",
     "Denver, CO", ["Business Analysis", "Requirements", "Process Improvement"]),
    ("iris.taylor@example.com", "Iris Taylor", "Mobile Developer at AppFactory",
     "Creating mobile experiences that delight users.",
     "Miami, FL", ["React Native", "Flutter", "Mobile Development"]),
    ("jack.anderson@example.com", "Jack Anderson", "AI Research Scientist at FutureLab",
     "Exploring the frontiers of artificial intelligence.",
     "Portland, OR", ["AI", "Deep Learning", "Research", "Python"]),
]

CONNECTED_USERS = [
    ("connected1@example.com", "Sarah Martinez", "iOS Developer"),
    ("connected2@example.com", "Michael Chen", "Backend Engineer"),
    ("connected3@example.com", "Jennifer Lee", "Product Designer"),
]

PENDING_USERS = [
    ("pending1@example.com", "Alex Thompson", "Marketing Manager"),
    ("pending2@example.com", "Jordan Kim", "Data Analyst"),
]

NOTIFICATION_FIXTURES = [
    ("like", "New Like", "Sarah Johnson liked your post", "Sarah Johnson"),
    ("comment", "New Comment", "Michael Chen commented on your post", "Michael Chen"),
    ("connection_request", "Connection Request", "Jennifer Lee wants to connect with you",
     "Jennifer Lee"),
    ("connection_accepted", "Connection Accepted",
     "Alex Thompson accepted your connection request", "Alex Thompson"),
    ("message", "New Message", "Jordan Kim sent you a message", "Jordan Kim"),
    ("mention", "You were mentioned", "Emily Rodriguez mentioned you in a post",
     "Emily Rodriguez"),
    ("profile_view", "Profile View", "Someone viewed your profile", "Anonymous"),
]

SIMULATED_NOTIFICATIONS = [
    ("like", "liked your post"),
    ("comment", "commented on your post"),
    ("profile_view", "viewed your profile"),
    ("message", "sent you a message"),
]

CONVERSATION_PARTNERS = [
    ("sarah.martinez@example.com", "Sarah Martinez", "iOS Developer",
     "Hey! How's the new project coming along?"),
    ("michael.chen@example.com", "Michael Chen", "Backend Engineer",
     "Great meeting today! Let's catch up soon."),
    ("jennifer.lee@example.com", "Jennifer Lee", "Product Designer",
     "Thanks for sharing those resources"),
    ("alex.thompson@example.com", "Alex Thompson", "Marketing Manager",
     "Are you free for coffee this week?"),
    ("jordan.kim@example.com", "Jordan Kim", "Data Analyst",
     "Looking forward to collaborating!"),
]

CHAT_SCRIPT = [
    (False, "Hey! How's everything going?"),
    (True, "Hey Sarah! Things are great, just working on some exciting projects."),
    (False, "That sounds awesome! What kind of projects?"),
    (True, "I'm building a new professional networking app. It's been really fun!"),
    (False, "That's amazing! I'd love to hear more about it sometime."),
    (True, "Definitely! Let's grab coffee next week and I can show you some demos."),
]

INCOMING_MESSAGES = [
    "How's your day going?",
    "Just saw your latest post!",
    "Are you attending the conference next week?",
    "Great idea in the meeting today!",
    "Let me know if you need any help.",
]

APPLICATION_SOURCES = ["ProNet Mobile", "ProNet Web", "Direct Apply", "Referral"]

INAPPROPRIATE_WORDS = ["spam", "fake", "scam", "inappropriate"]
