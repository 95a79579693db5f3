"""
Ecosystem profiles — the canonical rule table.

One ``Profile`` per ``Ecosystem``: base image, Dockerfile instructions,
default port mappings and any profile-level environment seed.  The
synthesizer looks rows up here; nothing else hardcodes an image tag.
"""

from __future__ import annotations

from src.core.models.build import Ecosystem, Profile


# ── Stack → profile mappings ───────────────────────────────────


_NODEJS = Profile(
    ecosystem=Ecosystem.NODEJS,
    base_image="node:18-alpine",
    instructions=(
        "WORKDIR /app",
        "COPY package*.json ./",
        "RUN npm install",
        "COPY . .",
        "EXPOSE 3000",
        'CMD ["npm", "start"]',
    ),
    ports=("3000:3000",),
)

_PYTHON = Profile(
    ecosystem=Ecosystem.PYTHON,
    base_image="python:3.9-slim",
    instructions=(
        "WORKDIR /app",
        "COPY requirements.txt .",
        "RUN pip install --no-cache-dir -r requirements.txt",
        "COPY . .",
        "EXPOSE 8000",
        'CMD ["python", "app.py"]',
    ),
    ports=("8000:8000",),
)

_GO = Profile(
    ecosystem=Ecosystem.GO,
    base_image="golang:1.20-alpine",
    instructions=(
        "WORKDIR /app",
        "COPY go.* .",
        "RUN go mod download",
        "COPY . .",
        "RUN go build -o main .",
        "EXPOSE 8080",
        'CMD ["./main"]',
    ),
    ports=("8080:8080",),
)

_JAVA_MAVEN = Profile(
    ecosystem=Ecosystem.JAVA_MAVEN,
    base_image="eclipse-temurin:17-jdk-alpine",
    instructions=(
        "WORKDIR /app",
        "COPY pom.xml .",
        "COPY .mvn .mvn",
        "COPY mvnw .",
        "RUN chmod +x mvnw",
        "RUN ./mvnw dependency:go-offline",
        "COPY src src",
        "RUN ./mvnw package -DskipTests",
        "EXPOSE 8080",
        'CMD ["java", "-jar", "target/*.jar"]',
    ),
    ports=("8080:8080",),
)

_JAVA_GRADLE = Profile(
    ecosystem=Ecosystem.JAVA_GRADLE,
    base_image="eclipse-temurin:17-jdk-alpine",
    instructions=(
        "WORKDIR /app",
        "COPY build.gradle settings.gradle ./",
        "COPY gradle gradle",
        "COPY gradlew .",
        "RUN chmod +x gradlew",
        "RUN ./gradlew dependencies",
        "COPY src src",
        "RUN ./gradlew build -x test",
        "EXPOSE 8080",
        'CMD ["java", "-jar", "build/libs/*.jar"]',
    ),
    ports=("8080:8080",),
)

_RUBY = Profile(
    ecosystem=Ecosystem.RUBY,
    base_image="ruby:3.2-alpine",
    instructions=(
        "WORKDIR /app",
        "COPY Gemfile Gemfile.lock ./",
        "RUN apk add --no-cache build-base postgresql-dev",
        "RUN bundle install",
        "COPY . .",
        "EXPOSE 3000",
        'CMD ["bundle", "exec", "rails", "server", "-b", "0.0.0.0"]',
    ),
    ports=("3000:3000",),
    environment={"RAILS_ENV": "production"},
)

_PHP = Profile(
    ecosystem=Ecosystem.PHP,
    base_image="php:8.2-apache",
    instructions=(
        "WORKDIR /var/www/html",
        "RUN apt-get update && apt-get install -y \\\n"
        "    libzip-dev \\\n"
        "    zip \\\n"
        "    && docker-php-ext-install zip pdo pdo_mysql",
        "COPY --from=composer:latest /usr/bin/composer /usr/bin/composer",
        "COPY composer.* ./",
        "RUN composer install --no-dev --no-scripts --no-autoloader",
        "COPY . .",
        "RUN composer dump-autoload --optimize",
        "RUN chown -R www-data:www-data /var/www/html",
        "EXPOSE 80",
    ),
    ports=("80:80",),
)

_GENERIC = Profile(
    ecosystem=Ecosystem.GENERIC,
    base_image="ubuntu:latest",
    instructions=(
        "WORKDIR /app",
        "COPY . .",
        'CMD ["/bin/bash"]',
    ),
)

PROFILES: dict[Ecosystem, Profile] = {
    p.ecosystem: p
    for p in (
        _NODEJS,
        _PYTHON,
        _GO,
        _JAVA_MAVEN,
        _JAVA_GRADLE,
        _RUBY,
        _PHP,
        _GENERIC,
    )
}


# ── Public API ──────────────────────────────────────────────────


def get_profile(ecosystem: Ecosystem) -> Profile:
    """Return the profile row for *ecosystem*."""
    return PROFILES[ecosystem]


def supported_ecosystems() -> list[str]:
    """Return ecosystem names with a profile available."""
    return sorted(e.value for e in PROFILES)
